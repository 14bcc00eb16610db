import math

import pytest

from route_planner.domain.models import (
    EARTH_RADIUS_KM,
    City,
    Link,
    Route,
    TransportMode,
    WayPoint,
    distance,
)


def test_distance_is_zero_for_same_point():
    bern = WayPoint("Bern", 46.948, 7.4474)

    assert bern.distance(bern) == 0.0
    assert distance(bern, WayPoint("", 46.948, 7.4474)) == 0.0


def test_distance_is_symmetric():
    bern = WayPoint("Bern", 46.948, 7.4474)
    tripolis = WayPoint("Tripolis", 32.876174, 13.187507)

    assert bern.distance(tripolis) == pytest.approx(tripolis.distance(bern))


def test_one_degree_of_latitude():
    a = WayPoint("a", 0.0, 0.0)
    b = WayPoint("b", 1.0, 0.0)

    assert a.distance(b) == pytest.approx(EARTH_RADIUS_KM * math.pi / 180, rel=1e-6)


def test_bern_to_tripolis_distance():
    bern = WayPoint("Bern", 46.95, 7.44)
    tripolis = WayPoint("Tripolis", 32.876174, 13.187507)

    assert bern.distance(tripolis) == pytest.approx(1638.7, abs=5.0)


def test_nearby_points_never_give_nan():
    a = WayPoint("a", 47.0, 8.0)
    b = WayPoint("b", 47.0, 8.0000001)

    d = a.distance(b)

    assert not math.isnan(d)
    assert d >= 0.0


@pytest.mark.parametrize(
    "lat, lon",
    [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_waypoint_rejects_out_of_range_coordinates(lat, lon):
    with pytest.raises(ValueError):
        WayPoint("x", lat, lon)


def test_waypoint_is_immutable():
    wp = WayPoint("Bern", 46.95, 7.44)

    with pytest.raises(AttributeError):
        wp.latitude = 0.0  # type: ignore[misc]


def test_waypoint_str():
    assert str(WayPoint("Bern", 46.95, 7.44)) == "WayPoint: Bern 46.95/7.44"
    assert str(WayPoint("", 46.95, 7.44)) == "WayPoint: 46.95/7.44"


def test_waypoint_arithmetic_keeps_left_name():
    a = WayPoint("a", 10.0, 20.0)
    b = WayPoint("b", 1.5, 2.5)

    assert a + b == WayPoint("a", 11.5, 22.5)
    assert a - b == WayPoint("a", 8.5, 17.5)


def test_cities_are_equal_by_name():
    first = City.at("Bern", 46.95, 7.44, country="Switzerland")
    second = City.at("Bern", 0.0, 0.0)

    assert first == second
    assert hash(first) == hash(second)
    assert first != City.at("Basel", 46.95, 7.44)


def test_link_between_uses_great_circle_distance(city_a, city_b):
    link = Link.between(city_a, city_b, TransportMode.BUS)

    assert link.distance == pytest.approx(city_a.location.distance(city_b.location))
    assert link.transport_mode is TransportMode.BUS


def test_link_endpoints(city_a, city_b, city_c):
    link = Link.between(city_a, city_b)

    assert link.touches(city_a) and link.touches(city_b)
    assert not link.touches(city_c)
    assert link.other_end(city_a) == city_b
    assert link.other_end(city_b) == city_a
    with pytest.raises(ValueError):
        link.other_end(city_c)


def test_link_oriented_from_swaps_endpoints(city_a, city_b):
    link = Link.between(city_a, city_b)
    flipped = link.oriented_from(city_b)

    assert flipped.from_city == city_b
    assert flipped.to_city == city_a
    assert flipped.distance == link.distance
    assert link.oriented_from(city_a) is link


def test_route_properties(city_a, city_b, city_c):
    ab = Link(city_a, city_b, 10.0)
    bc = Link(city_b, city_c, 5.0)
    route = Route(city_a, city_c, TransportMode.RAIL, (ab, bc))

    assert not route.is_empty
    assert route.num_links == 2
    assert route.total_distance == 15.0
    assert route.cities == (city_a, city_b, city_c)


def test_empty_route_visits_only_departure(city_a):
    route = Route(city_a, city_a, TransportMode.RAIL)

    assert route.is_empty
    assert route.total_distance == 0
    assert route.cities == (city_a,)


@pytest.mark.parametrize("text", ["rail", "Rail", " RAIL "])
def test_transport_mode_parse(text):
    assert TransportMode.parse(text) is TransportMode.RAIL


def test_transport_mode_parse_unknown():
    with pytest.raises(ValueError, match="Unknown transport mode"):
        TransportMode.parse("hovercraft")
