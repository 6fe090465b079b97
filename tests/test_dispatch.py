"""Tests for data type dispatch and the result wrapper."""

import warnings
from pathlib import Path

import pytest

from aprsposition import (
    ChecksumPolicy,
    ParseResult,
    Position,
    UnparsablePositionError,
    decode_position,
    is_compressed,
    try_decode_position,
)
from aprsposition import dispatch


class TestIsCompressed:
    def test_compressed(self):
        assert is_compressed(b"!/5L!!<*e7>7P[", 1) is True

    def test_lowercase_overlay(self):
        assert is_compressed(b"!aL!!!<*e7>7P[", 1) is True

    def test_uncompressed(self):
        assert is_compressed(b"!4903.50N/07201.75W-", 1) is False

    def test_nothing_after_cursor(self):
        assert is_compressed(b"!", 1) is False


class TestDecodePosition:
    def test_uncompressed(self):
        result = decode_position(b"!4903.50N/07201.75W-Test")
        assert result.latitude == pytest.approx(49.05833, abs=1e-5)
        assert result.longitude == pytest.approx(-72.02917, abs=1e-5)

    def test_compressed_with_messaging(self):
        result = decode_position(b"=/5L!!<*e7>7P[")
        assert result.latitude == pytest.approx(49.5, abs=1e-5)
        assert result.longitude == pytest.approx(-72.75, abs=1e-5)

    def test_timestamped_compressed(self):
        result = decode_position(b"@092345z/5L!!<*e7>7P[")
        assert result.latitude == pytest.approx(49.5, abs=1e-5)

    def test_timestamped_uncompressed(self):
        result = decode_position(b"/092345z4903.50N/07201.75W>")
        assert result.latitude == pytest.approx(49.05833, abs=1e-5)
        assert result.symbol_code == ">"

    def test_mic_e(self):
        result = decode_position(b"`dYgl([>/", "490S5P-1")
        assert result.latitude == pytest.approx(49.05833, abs=1e-5)
        assert result.longitude == pytest.approx(-72.02917, abs=1e-5)

    def test_old_mic_e(self):
        result = decode_position(b"'dYgl([>/", "490S5P")
        assert result.symbol_code == ">"

    def test_mic_e_without_destination(self):
        with pytest.raises(UnparsablePositionError, match="destination"):
            decode_position(b"`dYgl([>/")

    def test_nmea(self):
        result = decode_position(b"$GPWPL,4610.586,N,00607.754,E,4*70")
        assert result.symbol_table == "/"
        assert result.latitude == pytest.approx(46.17643, abs=1e-5)

    def test_nmea_checksum_policy_is_passed_on(self):
        with pytest.raises(UnparsablePositionError, match="Missing NMEA checksum"):
            decode_position(
                b"$GPWPL,4610.586,N,00607.754,E,4",
                nmea_checksum=ChecksumPolicy.REQUIRED,
            )

    def test_unsupported_type(self):
        with pytest.raises(UnparsablePositionError, match="Unsupported data type"):
            decode_position(b">Net control tonight")

    def test_empty(self):
        with pytest.raises(UnparsablePositionError, match="Empty"):
            decode_position(b"")


class TestTryDecodePosition:
    def test_success(self):
        result = try_decode_position(b"!4903.50N/07201.75W-")
        assert result.has_fault is False
        assert result.fault is None
        assert result.position.latitude == pytest.approx(49.05833, abs=1e-5)

    def test_failure(self):
        result = try_decode_position(b"!4903.50X/07201.75W-")
        assert result.has_fault is True
        assert result.position is None
        assert result.fault == "Bad latitude sign character"

    def test_non_ascii_timestamp_is_a_fault(self):
        result = try_decode_position(b"@0923\xb2\xb2z4903.50N/07201.75W>")
        assert result.has_fault is True
        assert result.fault == "Expected decimal dot at pos 2"


class TestParseResult:
    def test_requires_position_or_fault(self):
        with pytest.raises(ValueError):
            ParseResult()

    def test_rejects_both_position_and_fault(self):
        with pytest.raises(ValueError):
            ParseResult(position=Position(49.05833, -72.02917), fault="Bad latitude sign")


def test_module_source_compiles_without_warnings():
    source = Path(dispatch.__file__).read_text()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(source, dispatch.__file__, "exec")
