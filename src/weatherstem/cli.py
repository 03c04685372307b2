"""Command line entry point: fetch, normalize and print local station weather."""

from __future__ import annotations

import argparse
import sys

from weatherstem._logging import get_logger
from weatherstem.client import WeatherstemClient, load_response
from weatherstem.config import EXAMPLE_CONFIG, find_config
from weatherstem.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    WeatherstemAPIError,
    WeatherstemError,
    WeatherstemValidationError,
)
from weatherstem.formatters import (
    WBGT_LEGEND,
    format_full,
    format_json,
    format_lite,
    format_original,
)
from weatherstem.geodesy import distance_km, distance_mi, distance_nm
from weatherstem.models.config import Config
from weatherstem.models.normalized import WeatherData, WeatherUnits
from weatherstem.models.raw import WeatherInfo
from weatherstem.normalizer import normalize_info

EXIT_OK = 0
EXIT_NETWORK = 1
EXIT_PARSE = 2
EXIT_CONFIG = 3


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="weatherstem",
        description="Show current conditions at your local WeatherSTEM stations.",
        epilog="Any extra argument prints the WBGT flag legend.",
    )
    parser.add_argument("--json", action="store_true", help="Output cooked data as JSON")
    parser.add_argument(
        "--kilo", action="store_true", help="Output station distances in kilometers"
    )
    parser.add_argument(
        "--mile", action="store_true", help="Output station distances in statute miles"
    )
    parser.add_argument("--lite", action="store_true", help="Output lightweight cooked data")
    parser.add_argument("--orig", action="store_true", help="Output original API results")
    parser.add_argument(
        "--rose", action="store_true", help="Output boring compass rose directions"
    )
    parser.add_argument(
        "--input",
        metavar="FILE",
        help="Read a saved API response from FILE instead of calling the API",
    )
    parser.add_argument("legend", nargs="*", help=argparse.SUPPRESS)
    return parser


def convert(
    infos: list[WeatherInfo],
    config: Config,
    *,
    plain_rose: bool = False,
    unit: str = "NM",
) -> list[tuple[WeatherData, WeatherUnits]]:
    """Normalize every station and fill in its distance from the operator."""
    distance_fn = {"km": distance_km, "mi": distance_mi, "NM": distance_nm}[unit]
    results = []
    for info in infos:
        data, units = normalize_info(info, plain_rose=plain_rose)
        if config.me is not None:
            data = data.model_copy(update={"distance": distance_fn(config.me, data.topo)})
        units = units.model_copy(update={"distance": unit})
        results.append((data, units))
    return results


def render(
    infos: list[WeatherInfo],
    converted: list[tuple[WeatherData, WeatherUnits]],
    args: argparse.Namespace,
) -> list[str]:
    """Pick the output blocks for the requested display mode."""
    if args.orig:
        return [format_original(info) for info in infos]
    if args.json:
        return [format_json(data, units) for data, units in converted]
    if args.lite:
        return [format_lite(data) for data, _ in converted]
    return [format_full(data, units) for data, units in converted]


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    if args.legend:
        print(WBGT_LEGEND)
        return EXIT_OK

    logger = get_logger()

    try:
        config = find_config()
    except ConfigNotFoundError:
        logger.error(
            "Config file not found. It should look like this and be in "
            "'weatherstem.json', either in the current or in your $HOME/.config directory."
        )
        logger.error(EXAMPLE_CONFIG)
        return EXIT_CONFIG
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG

    try:
        if args.input:
            infos = load_response(args.input)
        else:
            with WeatherstemClient(config) as ws:
                infos = ws.fetch()
    except (WeatherstemValidationError, WeatherstemAPIError) as exc:
        # The API answered, just not with station data
        logger.error("Cannot unmarshal API results. %s", exc)
        return EXIT_PARSE
    except (WeatherstemError, OSError) as exc:
        logger.error("Call to API failed. %s", exc)
        return EXIT_NETWORK

    unit = "km" if args.kilo else "mi" if args.mile else "NM"
    converted = convert(infos, config, plain_rose=args.rose, unit=unit)
    for block in render(infos, converted, args):
        print(block)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
