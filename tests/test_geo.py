import math

import pytest

from citygrid.geo import (
    distance_squared,
    haversine_km,
    parse_coordinates,
    parse_int,
    parse_number,
    sector_coordinates,
)


def test_haversine_same_point_is_zero():
    assert haversine_km(33.684, 73.025, 33.684, 73.025) == pytest.approx(0.0)


def test_haversine_is_symmetric():
    forward = haversine_km(33.684, 73.025, 33.720, 73.048)
    backward = haversine_km(33.720, 73.048, 33.684, 73.025)
    assert forward == pytest.approx(backward)
    assert forward > 0.0


def test_haversine_along_meridian_is_arc_length():
    assert haversine_km(10.0, 20.0, 11.0, 20.0) == pytest.approx(
        6371.0 * math.radians(1.0)
    )


def test_haversine_triangle_inequality():
    a = (33.684, 73.025)
    b = (33.700, 73.037)
    c = (33.720, 73.048)
    assert haversine_km(*a, *c) <= haversine_km(*a, *b) + haversine_km(*b, *c) + 1e-9


def test_distance_squared_zero_and_symmetric():
    assert distance_squared(1.5, 2.5, 1.5, 2.5) == 0.0
    assert distance_squared(0.0, 0.0, 3.0, 4.0) == distance_squared(3.0, 4.0, 0.0, 0.0)
    assert distance_squared(0.0, 0.0, 3.0, 4.0) == pytest.approx(25.0)


@pytest.mark.parametrize(
    "sector, expected",
    [
        ("G-10", (33.684, 73.025)),
        ("F-10", (33.705, 73.038)),
        ("Blue Area", (33.697, 73.039)),
    ],
)
def test_known_sectors(sector, expected):
    assert sector_coordinates(sector) == expected


@pytest.mark.parametrize("dashed", ["G-10", "F-8", "F-6", "G-9", "F-7", "G-8", "H-8", "I-8", "G-6", "F-10"])
def test_sector_aliases_without_dash(dashed):
    assert sector_coordinates(dashed.replace("-", "")) == sector_coordinates(dashed)


def test_unknown_sector_uses_city_centre():
    assert sector_coordinates("Z-99") == (33.684, 73.047)
    assert sector_coordinates("") == sector_coordinates("Nowhere")


def test_parse_coordinates_quoted():
    lat, lon = parse_coordinates('"33.684, 73.025"')
    assert lat == pytest.approx(33.684)
    assert lon == pytest.approx(73.025)


def test_parse_coordinates_with_tabs_and_negatives():
    lat, lon = parse_coordinates("\t-12.5 ,\t-45.25 ")
    assert lat == pytest.approx(-12.5)
    assert lon == pytest.approx(-45.25)


def test_parse_coordinates_ignores_stray_characters():
    lat, lon = parse_coordinates("3x3.5, 7y2")
    assert lat == pytest.approx(33.5)
    assert lon == pytest.approx(72.0)


def test_parse_coordinates_splits_on_first_comma():
    lat, lon = parse_coordinates("1.5, 2.5, 9")
    assert lat == pytest.approx(1.5)
    assert lon == pytest.approx(2.59)


@pytest.mark.parametrize("text", ["", "33.684 73.025", '"33.684"'])
def test_parse_coordinates_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_coordinates(text)


def test_parse_number_reads_leading_value():
    assert parse_number("  -12.5abc") == pytest.approx(-12.5)
    assert parse_number("8.75") == pytest.approx(8.75)


def test_parse_number_stops_at_second_point():
    assert parse_number("1.2.3") == pytest.approx(1.2)


def test_parse_number_empty_or_garbage_is_zero():
    assert parse_number("") == 0.0
    assert parse_number("abc") == 0.0


def test_parse_int_reads_leading_digits():
    assert parse_int("42.9") == 42
    assert parse_int(" \t-7beds") == -7
    assert parse_int("") == 0
    assert parse_int("x12") == 0