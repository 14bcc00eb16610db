"""Tests for the in-memory city registry adapter."""

import pytest

from route_planner.adapters.registry import InMemoryCityRegistry
from route_planner.domain.errors import LoadError
from route_planner.domain.models import City


class TestInMemoryCityRegistry:
    """Test suite for InMemoryCityRegistry."""

    @pytest.fixture
    def cities_file(self, write_tsv):
        return write_tsv(
            "cities.txt",
            [
                ("Bern", "Switzerland", 134794, 46.9480, 7.4474),
                ("Zürich", "Switzerland", 415367, 47.3769, 8.5417),
                ("Olten", "Switzerland", 18823, 47.3500, 7.9073),
                ("Basel", "Switzerland", 177654, 47.5596, 7.5886),
                ("Lugano", 46.0037, 8.9511),
            ],
        )

    def test_read_cities(self, cities_file):
        registry = InMemoryCityRegistry()

        assert registry.read_cities(cities_file) == 5
        assert len(registry) == 5

        bern = registry.find_city("Bern")
        assert bern is not None
        assert bern.country == "Switzerland"
        assert bern.population == 134794
        assert bern.location.latitude == pytest.approx(46.948)
        assert registry.find_city("Lugano").country == ""

    def test_malformed_rows_are_skipped(self, write_tsv):
        path = write_tsv(
            "cities.txt",
            [
                ("Bern", "Switzerland", 134794, 46.9480, 7.4474),
                ("Nowhere", "Switzerland", "many", "north", "east"),
                ("Pole", 95.0, 0.0),
                ("Lonely",),
            ],
        )
        registry = InMemoryCityRegistry()

        assert registry.read_cities(path) == 1
        assert "Nowhere" not in registry
        assert "Pole" not in registry

    def test_missing_file_raises_load_error(self, tmp_path):
        registry = InMemoryCityRegistry()

        with pytest.raises(LoadError) as excinfo:
            registry.read_cities(tmp_path / "missing.txt")

        assert excinfo.value.file_path.endswith("missing.txt")
        assert isinstance(excinfo.value.cause, OSError)

    def test_find_city_ignores_case_and_blanks(self, cities_file):
        registry = InMemoryCityRegistry()
        registry.read_cities(cities_file)

        assert registry.find_city("  zürich ") == registry.find_city("Zürich")
        assert "BERN" in registry
        assert registry.find_city("Atlantis") is None

    def test_add_replaces_same_name(self):
        registry = InMemoryCityRegistry()
        registry.add(City.at("Bern", 46.0, 7.0))
        registry.add(City.at("bern", 47.0, 8.0))

        assert len(registry) == 1
        assert registry.find_city("Bern").location.latitude == 47.0

    def test_find_cities_between(self, cities_file):
        registry = InMemoryCityRegistry()
        registry.read_cities(cities_file)
        bern = registry.find_city("Bern")
        zurich = registry.find_city("Zürich")

        between = registry.find_cities_between(bern, zurich)

        # Basel lies north of Zürich and Lugano south of Bern
        assert [c.name for c in between] == ["Bern", "Olten", "Zürich"]

    def test_find_cities_between_sorts_by_distance_from_source(self):
        registry = InMemoryCityRegistry()
        for city in (
            City.at("S", 0.0, 0.0),
            City.at("Far", 0.9, 0.9),
            City.at("Near", 0.1, 0.1),
            City.at("T", 1.0, 1.0),
        ):
            registry.add(city)

        between = registry.find_cities_between(
            registry.find_city("S"), registry.find_city("T")
        )

        assert [c.name for c in between] == ["S", "Near", "Far", "T"]

    def test_find_cities_between_same_city(self, cities_file):
        registry = InMemoryCityRegistry()
        registry.read_cities(cities_file)
        bern = registry.find_city("Bern")

        assert registry.find_cities_between(bern, bern) == [bern]

    def test_oversized_row_is_skipped(self, tmp_path):
        path = tmp_path / "cities.txt"
        path.write_text(
            "Bern\tSwitzerland\t134794\t46.948\t7.4474\n"
            + "X" * 200000
            + "\tSwitzerland\t1\t47.0\t8.0\n"
            + "Olten\t47.35\t7.9073\n",
            encoding="utf-8",
        )
        registry = InMemoryCityRegistry()

        assert registry.read_cities(path) == 2
        assert [c.name for c in registry] == ["Bern", "Olten"]
