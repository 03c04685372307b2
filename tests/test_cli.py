"""Tests for the command line entry point."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from weatherstem.cli import (
    EXIT_CONFIG,
    EXIT_NETWORK,
    EXIT_OK,
    EXIT_PARSE,
    create_parser,
    main,
)
from tests.conftest import (
    API_URL,
    DOWN_WEATHER_INFO,
    SAMPLE_CONFIG,
    SAMPLE_WEATHER_INFO,
    write_config,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """An empty working directory with an empty home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(home))
    return tmp_path


@pytest.fixture
def configured(workdir):
    write_config(workdir / "weatherstem.json", SAMPLE_CONFIG)
    return workdir


class TestParser:
    def test_flags(self) -> None:
        args = create_parser().parse_args(["--json", "--kilo", "--rose"])
        assert args.json and args.kilo and args.rose
        assert not args.lite
        assert args.legend == []

    def test_positional(self) -> None:
        args = create_parser().parse_args(["help"])
        assert args.legend == ["help"]


class TestMain:
    def test_legend(self, capsys) -> None:
        assert main(["help"]) == EXIT_OK
        assert "Current WBGT flags:" in capsys.readouterr().out

    def test_config_not_found(self, workdir, log_file) -> None:
        assert main([]) == EXIT_CONFIG
        content = log_file.read_text()
        assert "Config file not found" in content
        assert '"version":"3.0"' in content

    def test_unsupported_config(self, workdir, log_file) -> None:
        write_config(workdir / "weatherstem.json", {**SAMPLE_CONFIG, "version": "4.0"})
        assert main([]) == EXIT_CONFIG
        assert "Config version mismatch" in log_file.read_text()

    @respx.mock
    def test_network_failure(self, configured) -> None:
        respx.post(API_URL).mock(side_effect=httpx.ConnectError("fail"))
        assert main([]) == EXIT_NETWORK

    @respx.mock
    def test_http_error_is_a_parse_failure(self, configured, log_file) -> None:
        respx.post(API_URL).mock(
            return_value=httpx.Response(401, json={"error": "bad key"})
        )
        assert main([]) == EXIT_PARSE
        assert "HTTP 401" in log_file.read_text()

    @respx.mock
    def test_server_error_is_a_parse_failure(self, configured) -> None:
        respx.post(API_URL).mock(return_value=httpx.Response(503, text="busy"))
        assert main([]) == EXIT_PARSE

    @respx.mock
    def test_unparseable_response(self, configured, log_file) -> None:
        respx.post(API_URL).mock(return_value=httpx.Response(200, text="Invalid API key"))
        assert main([]) == EXIT_PARSE
        assert "Cannot unmarshal API results." in log_file.read_text()

    @respx.mock
    def test_full_output(self, configured, capsys) -> None:
        respx.post(API_URL).mock(
            return_value=httpx.Response(200, json=[SAMPLE_WEATHER_INFO, DOWN_WEATHER_INFO])
        )
        assert main([]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Ponce Inlet (ponceinlet)" in out
        assert "NM 2020-08-14 10:15:00" in out
        assert "Daytona Beach Shores (fswndaytonabch)" in out
        assert "Greco-Tramontana" in out

    @respx.mock
    def test_json_output_in_km(self, configured, capsys) -> None:
        respx.post(API_URL).mock(return_value=httpx.Response(200, json=[SAMPLE_WEATHER_INFO]))
        assert main(["--json", "--kilo"]) == EXIT_OK
        data_line, units_line = capsys.readouterr().out.splitlines()
        data = json.loads(data_line)
        units = json.loads(units_line)
        assert units["distance"] == "km"
        # Ponce Inlet is a few km south of the operator
        assert 0 < data["distance"] < 20

    @respx.mock
    def test_miles(self, configured, capsys) -> None:
        respx.post(API_URL).mock(return_value=httpx.Response(200, json=[SAMPLE_WEATHER_INFO]))
        assert main(["--json", "--mile"]) == EXIT_OK
        units = json.loads(capsys.readouterr().out.splitlines()[1])
        assert units["distance"] == "mi"

    @respx.mock
    def test_lite_with_plain_rose(self, configured, capsys) -> None:
        respx.post(API_URL).mock(return_value=httpx.Response(200, json=[SAMPLE_WEATHER_INFO]))
        assert main(["--lite", "--rose"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "gust (22° North-northeast)" in out

    @respx.mock
    def test_original_output(self, configured, capsys) -> None:
        respx.post(API_URL).mock(return_value=httpx.Response(200, json=[SAMPLE_WEATHER_INFO]))
        assert main(["--orig"]) == EXIT_OK
        doc = json.loads(capsys.readouterr().out)
        assert doc["station"]["handle"] == "ponceinlet"

    def test_input_file(self, configured, capsys) -> None:
        saved = configured / "response.json"
        saved.write_text(json.dumps([SAMPLE_WEATHER_INFO]), encoding="utf-8")
        assert main(["--input", str(saved), "--lite"]) == EXIT_OK
        assert "Ponce Inlet (ponceinlet)" in capsys.readouterr().out

    def test_missing_input_file(self, configured) -> None:
        assert main(["--input", str(configured / "absent.json")]) == EXIT_NETWORK

    def test_no_location_leaves_distance_zero(self, workdir, capsys) -> None:
        data = {k: v for k, v in SAMPLE_CONFIG.items() if k != "me"}
        write_config(workdir / "weatherstem.json", data)
        saved = workdir / "response.json"
        saved.write_text(json.dumps([SAMPLE_WEATHER_INFO]), encoding="utf-8")
        assert main(["--input", str(saved), "--json"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out.splitlines()[0])["distance"] == 0.0
