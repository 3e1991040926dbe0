"""Testy interfejsu wiersza poleceń."""

import io
import json

import pytest
from rich.console import Console

import main
from grove_light import config as config_module


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
    for name in ("GROVE_PAYLOAD", "GROVE_LOCATION", "GROVE_LOG_LEVEL", "GROVE_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output(monkeypatch) -> io.StringIO:
    buffer = io.StringIO()
    monkeypatch.setattr(main, "console", Console(file=buffer, width=200))
    return buffer


@pytest.fixture
def payload_file(tmp_path, schedule_payload):
    path = tmp_path / "status.json"
    path.write_text(json.dumps({"sched": schedule_payload, "mode": "SCHED_SS"}))
    return path


class TestBuildChanges:

    def test_no_arguments_means_no_changes(self):
        assert main.build_changes(main.parse_args(["status.json"])) is None

    def test_converts_hours_and_time(self):
        args = main.parse_args(["status.json", "--sunrise", "06:30", "--day-length", "13.5"])
        changes = main.build_changes(args)
        assert changes.sunrise_begins == 23400
        assert changes.day_length == 48600
        assert changes.intensity is None

    def test_invalid_sunrise_rejected(self):
        with pytest.raises(SystemExit):
            main.parse_args(["status.json", "--sunrise", "25:00"])


class TestMain:

    def test_prints_light(self, payload_file, output):
        assert main.main([str(payload_file), "--location", "seedling"]) == 0
        text = output.getvalue()
        assert "06:00 - 20:00" in text
        assert "SCHED_SS" in text
        assert "seedling" in text

    def test_json_output_with_edit(self, payload_file, output):
        assert main.main([str(payload_file), "--json", "--day-length", "10"]) == 0
        result = json.loads(output.getvalue())
        assert result["light"]["schedule"]["sunriseBegins"] == 21600
        assert result["light"]["interruption"] is None
        assert result["edited"]["nightBegins"] == 21600 + 10 * 3600
        assert result["edited"]["sunsetBegins"] == 21600 + 10 * 3600 - 1800

    def test_day_too_short(self, payload_file, output):
        assert main.main([str(payload_file), "--day-length", "0.5"]) == 1
        assert "Nie można zmienić harmonogramu" in output.getvalue()

    def test_invalid_payload(self, tmp_path, output):
        path = tmp_path / "status.json"
        path.write_text(json.dumps({"sched": {}, "mode": "bogus"}))
        assert main.main([str(path)]) == 1
        assert "mode" in output.getvalue()

    def test_missing_file(self, tmp_path, output):
        assert main.main([str(tmp_path / "missing.json")]) == 1

    def test_payload_from_environment(self, payload_file, output, monkeypatch):
        monkeypatch.setenv("GROVE_PAYLOAD", str(payload_file))
        monkeypatch.setenv("GROVE_JSON_OUTPUT", "true")
        assert main.main([]) == 0
        assert json.loads(output.getvalue())["light"]["mode"] == "SCHED_SS"

    def test_no_payload(self, output):
        assert main.main([]) == 1

    def test_unknown_location_in_environment(self, payload_file, output, monkeypatch):
        monkeypatch.setenv("GROVE_LOCATION", "kitchen")
        assert main.main([str(payload_file)]) == 1
        assert "Błędna konfiguracja" in output.getvalue()

    def test_unknown_log_level_in_environment(self, payload_file, output, monkeypatch):
        monkeypatch.setenv("GROVE_LOG_LEVEL", "loud")
        assert main.main([str(payload_file)]) == 1
        assert "LOUD" in output.getvalue()

    def test_unknown_log_level_argument(self, payload_file, output):
        with pytest.raises(SystemExit) as excinfo:
            main.main([str(payload_file), "--log-level", "loud"])
        assert excinfo.value.code == 2

    def test_log_level_argument_is_case_insensitive(self, payload_file, output):
        assert main.main([str(payload_file), "--log-level", "debug"]) == 0

    def test_payload_not_utf8(self, tmp_path, output):
        path = tmp_path / "status.json"
        path.write_bytes(b'{"mode": "\xff"}')
        assert main.main([str(path)]) == 1
        assert "Nie udało się wczytać" in output.getvalue()

    def test_payload_not_json(self, tmp_path, output):
        path = tmp_path / "status.json"
        path.write_text("{sched")
        assert main.main([str(path)]) == 1
