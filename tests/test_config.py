from pathlib import Path

import pytest
from pydantic import ValidationError

from route_planner.config import AppConfig, RoutingConfig, get_config, reset_config
from route_planner.domain.models import TransportMode


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()

    assert config.routing.mode is TransportMode.RAIL
    assert config.routing.cities_path.name == "cities.txt"
    assert config.routing.links_path.name == "links.txt"
    assert config.routing.use_bounding_filter is False
    assert config.export.delimiter == ","
    assert config.observability.level == "INFO"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RP_ROUTING_DEFAULT_MODE", "bus")
    monkeypatch.setenv("RP_ROUTING_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RP_EXPORT_DELIMITER", ";")
    monkeypatch.setenv("RP_LOG_STRUCTURED", "true")

    config = get_config()

    assert config.routing.mode is TransportMode.BUS
    assert config.routing.links_path == tmp_path / "links.txt"
    assert config.export.delimiter == ";"
    assert config.observability.structured is True


def test_absolute_file_overrides_data_dir(tmp_path):
    routing = RoutingConfig(data_dir=Path("/nowhere"), links_file=tmp_path / "mine.txt")

    assert routing.links_path == tmp_path / "mine.txt"


def test_unknown_mode_is_rejected():
    with pytest.raises(ValidationError):
        AppConfig(routing=RoutingConfig(default_mode="teleport"))
