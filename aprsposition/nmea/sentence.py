"""NMEA sentence position decoder.

Some trackers transmit raw NMEA sentences as the APRS information field.
Supported sentence tags:
    $GPGGA  Global Positioning System Fix Data (fix quality must be 1)
    $GPGLL  Geographic Position, Latitude/Longitude (valid + autonomous)
    $GPRMC  Recommended Minimum Specific GPS Data (status must be A)
    $GPWPL  Waypoint Location
    $PNTS   Alinco EJ-41U private sentence, version 1

$GPGSA, $GPVTG and $GPGSV are recognized but rejected: they have no position.
The decoded position always uses the GPS symbol ``/>``.
"""

import logging

from aprsposition.degmin import parse_degree_minutes
from aprsposition.errors import UnparsablePositionError
from aprsposition.nmea.checksum import ChecksumPolicy, check_sentence_checksum
from aprsposition.nmea.fields import (
    IGNORED_SENTENCES,
    SENTENCE_LAYOUTS,
    SentenceLayout,
)
from aprsposition.position import Position

__all__ = ["parse_nmea"]

logger = logging.getLogger(__name__)

_MINIMUM_FIELD_COUNT = 5
_COORDINATE_LENGTH = 9
_PNTS_TAG = "$PNTS"


def _select_layout(fields: list[str]) -> SentenceLayout:
    """Find the layout for this sentence, applying the field-count rules."""
    tag = fields[0]
    if tag in IGNORED_SENTENCES:
        raise UnparsablePositionError("Ignored NMEA sentence")

    layout = SENTENCE_LAYOUTS.get(tag)
    if layout is None or len(fields) < layout.minimum_fields:
        raise UnparsablePositionError("Invalid NMEA sentence")
    if tag == _PNTS_TAG and fields[1] != "1":
        raise UnparsablePositionError("Invalid NMEA sentence")
    return layout


def _signed(value: float, sign: str, positive: str, negative: str, name: str) -> float:
    if sign in (negative, negative.lower()):
        return -value
    if sign in (positive, positive.lower()):
        return value
    raise UnparsablePositionError(f"Bad {name} sign")


def parse_nmea(
    payload: bytes, checksum: ChecksumPolicy = ChecksumPolicy.IGNORE
) -> Position:
    """Decode the position carried by an NMEA sentence.

    Args:
        payload: The sentence, e.g. ``b"$GPWPL,4610.586,N,00607.754,E,4*70"``.
        checksum: How to treat the ``*hh`` suffix. IGNORE by default;
            OPTIONAL accepts sentences relayed without it.

    Returns:
        Position with ambiguity 0 and symbol ``/>``.

    Raises:
        UnparsablePositionError: If the sentence is unknown, ignored, too
            short, fails its validity gate or checksum policy, or holds a
            malformed coordinate.
    """
    sentence = payload.decode("latin-1")
    fields = sentence.split(",")
    if len(fields) < _MINIMUM_FIELD_COUNT:
        raise UnparsablePositionError("Too few parts in NMEA sentence")

    check_sentence_checksum(sentence, checksum)

    layout = _select_layout(fields)
    cause = layout.gate(fields)
    if cause is not None:
        logger.debug("Rejected %s: %s", fields[0], cause)
        raise UnparsablePositionError(cause)

    latitude = parse_degree_minutes(
        fields[layout.latitude], 0, 2, _COORDINATE_LENGTH, True
    )
    longitude = parse_degree_minutes(
        fields[layout.longitude], 0, 3, _COORDINATE_LENGTH, True
    )
    if latitude > 90.0:
        raise UnparsablePositionError("Latitude too high")
    if longitude > 180.0:
        raise UnparsablePositionError("Longitude too high")

    latitude = _signed(latitude, fields[layout.latitude_sign], "N", "S", "latitude")
    longitude = _signed(longitude, fields[layout.longitude_sign], "E", "W", "longitude")
    return Position(latitude, longitude, 0, "/", ">")
