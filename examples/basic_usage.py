"""Basic usage examples for the weatherstem client."""

from weatherstem import WeatherstemClient, find_config, normalize_info
from weatherstem.geodesy import distance_km


def main() -> None:
    config = find_config()
    print(f"=== Config version {config.version}, {len(config.stations)} stations ===")

    with WeatherstemClient(config) as ws:
        infos = ws.fetch()

    if not infos:
        print("  No stations returned.")
        return

    for info in infos:
        data, units = normalize_info(info, plain_rose=True)
        print(f"\n=== {data.display_name} ({data.handle}) at {data.observed_at} ===")
        if info.record.down_since:
            print(f"  Down since {info.record.down_since}")
        if config.me is not None:
            print(f"  {distance_km(config.me, data.topo):.1f} km away")
        print(f"  Air: {data.temperature[0]}{units.temperature[0]}, Humidity: {data.humidity}%")
        print(f"  Wind: {data.windspeed[0]} {units.windspeed[0]} from the {data.wind[1]}")


if __name__ == "__main__":
    main()
