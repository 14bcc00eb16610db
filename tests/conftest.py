"""Shared fixtures: a small Swiss-style network around three cities."""

import pytest

from route_planner.adapters.registry import InMemoryCityRegistry
from route_planner.domain.models import City, Link, TransportMode
from route_planner.graph.routes import Routes


@pytest.fixture
def city_a():
    return City.at("A", 47.0, 8.0)


@pytest.fixture
def city_b():
    return City.at("B", 47.1, 8.1)


@pytest.fixture
def city_c():
    return City.at("C", 47.2, 8.2)


@pytest.fixture
def registry(city_a, city_b, city_c):
    reg = InMemoryCityRegistry()
    for city in (city_a, city_b, city_c):
        reg.add(city)
    reg.add(City.at("D", 46.5, 7.0))
    return reg


@pytest.fixture
def routes(registry, city_a, city_b, city_c):
    """Rail links A-B and B-C only."""
    engine = Routes(cities=registry)
    engine.add_link(Link.between(city_a, city_b, TransportMode.RAIL))
    engine.add_link(Link.between(city_b, city_c, TransportMode.RAIL))
    return engine


@pytest.fixture
def write_tsv(tmp_path):
    """Write rows as a tab-separated file and return its path."""

    def _write(name, rows):
        path = tmp_path / name
        path.write_text(
            "".join("\t".join(str(v) for v in row) + "\n" for row in rows),
            encoding="utf-8",
        )
        return path

    return _write
