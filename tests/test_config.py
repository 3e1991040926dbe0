"""Testy konfiguracji ze zmiennych środowiskowych."""

import pytest

from grove_light import config as config_module
from grove_light.config import Config
from grove_light.models import Location

ENV_VARS = ("GROVE_PAYLOAD", "GROVE_LOCATION", "GROVE_LOG_LEVEL", "GROVE_JSON_OUTPUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfig:

    def test_defaults(self):
        config = Config.from_env()
        assert config.payload_path is None
        assert config.location == Location.GARDEN
        assert config.log_level == "WARNING"
        assert config.json_output is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GROVE_PAYLOAD", "status.json")
        monkeypatch.setenv("GROVE_LOCATION", "Aquarium")
        monkeypatch.setenv("GROVE_LOG_LEVEL", "debug")
        monkeypatch.setenv("GROVE_JSON_OUTPUT", "TRUE")

        config = Config.from_env()
        assert config.payload_path == "status.json"
        assert config.location == Location.AQUARIUM
        assert config.log_level == "DEBUG"
        assert config.json_output is True

    def test_unknown_location(self, monkeypatch):
        monkeypatch.setenv("GROVE_LOCATION", "kitchen")
        with pytest.raises(ValueError):
            Config.from_env()

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("GROVE_LOG_LEVEL", "loud")
        with pytest.raises(ValueError):
            Config.from_env()
