"""Tests for the Position value type."""

import pytest

from aprsposition import Position, dist_from, round_degrees


class TestConstruction:
    def test_two_argument_defaults(self):
        position = Position(49.0583333, -72.0291667)
        assert position.ambiguity == 0
        assert position.symbol_table == "\\"
        assert position.symbol_code == "."
        assert position.altitude == -1
        assert position.extension == " sT"

    def test_coordinates_rounded_to_five_decimals(self):
        position = Position(49.0583333, -72.0291667)
        assert position.latitude == 49.05833
        assert position.longitude == -72.02917

    def test_rounding_is_idempotent(self):
        for value in (49.05833, -72.02917, 0.00001, -89.99999, 179.99999):
            assert round_degrees(value) == value
            assert round_degrees(round_degrees(value + 0.000004)) == round_degrees(
                value + 0.000004
            )

    def test_rounds_to_nearest(self):
        assert round_degrees(12.3456789) == 12.34568
        assert round_degrees(-0.000004) == 0.0

    def test_empty_extension_falls_back_to_placeholder(self):
        assert Position(0, 0, 0, "/", ">", extension="").extension == " sT"

    def test_value_equality(self):
        assert Position(1.000001, 2.0) == Position(1.0, 2.0)


class TestToDMS:
    def _position(self, ambiguity: int) -> Position:
        return Position(49.0583333, -72.0291667, ambiguity, "/", "-")

    def test_full_precision(self):
        position = self._position(0)
        assert position.to_dms(position.latitude, True) == "4903.50N"
        assert position.to_dms(position.longitude, False) == "07201.75W"

    @pytest.mark.parametrize(
        ("ambiguity", "expected"),
        [
            (1, "49  .  N"),
            (2, "490 .  N"),
            (3, "4903.  N"),
            (4, "4903.5 N"),
        ],
    )
    def test_ambiguous_latitude(self, ambiguity, expected):
        position = self._position(ambiguity)
        assert position.to_dms(position.latitude, True) == expected

    def test_ambiguous_longitude(self):
        position = self._position(2)
        assert position.to_dms(position.longitude, False) == "0720 .  W"

    def test_southern_and_eastern(self):
        position = Position(-33.5, 151.25)
        assert position.to_dms(position.latitude, True) == "3330.00S"
        assert position.to_dms(position.longitude, False) == "15115.00E"


class TestStringForms:
    def test_decimal_string(self):
        assert Position(49.0583333, -72.0291667).to_decimal_string() == "49.05833, -72.02917"

    def test_str(self):
        assert str(Position(1.5, -2.25)) == "Latitude:\t1.50000\nLongitude:\t-2.25000\n"

    def test_compressed_string(self):
        position = Position(49.5, -72.75, 0, "/", ">")
        assert position.to_compressed_string() == "/5L!!<*e8> sT"

    def test_compressed_string_carries_extension(self):
        position = Position(49.5, -72.75, 0, "/", ">", extension="7P[")
        assert position.to_compressed_string().endswith(">7P[")

    def test_compressed_characters_are_printable(self):
        for latitude, longitude in ((90, -180), (-90, 180), (0, 0)):
            encoded = Position(latitude, longitude, 0, "/", ">").to_compressed_string()
            assert all(33 <= ord(c) <= 123 for c in encoded[1:9])


class TestGeodesy:
    def test_one_degree_of_longitude_at_equator(self):
        assert dist_from(0, 0, 0, 1) == pytest.approx(69.0935, abs=1e-3)

    def test_static_and_module_function_agree(self):
        assert Position.dist_from(10, 20, 30, 40) == dist_from(10, 20, 30, 40)

    def test_distance_is_symmetric(self):
        a = Position(49.05833, -72.02917)
        b = Position(45.5, -73.5667)
        assert a.distance(b) == pytest.approx(b.distance(a))
        assert a.distance(a) == 0.0

    @pytest.mark.parametrize(
        ("target", "bearing"),
        [
            ((1.0, 0.0), 0.0),
            ((0.0, 1.0), 90.0),
            ((-1.0, 0.0), 180.0),
            ((0.0, -1.0), 270.0),
        ],
    )
    def test_direction_from_other(self, target, bearing):
        origin = Position(0.0, 0.0)
        assert Position(*target).direction(origin) == pytest.approx(bearing)

    def test_direction_is_in_range(self):
        bearing = Position(-33.9, 151.2).direction(Position(49.05833, -72.02917))
        assert 0.0 <= bearing < 360.0
