"""Compressed (base-91) APRS position decoder.

Compressed Position Format (13 bytes from the cursor):
    /5L!!<*e7>7P[
    ||   |   ||  |
    ||   |   |+--+-- cs/T extension (course/speed, range or altitude)
    ||   |   +-- Symbol code
    ||   +---+-- Longitude, 4 base-91 digits: -180 + value / 190463
    |+---+-- Latitude, 4 base-91 digits: 90 - value / 380926
    +-- Symbol table

The compressed format has no notion of position ambiguity.
"""

import logging

from aprsposition.base91 import decode_base91
from aprsposition.errors import UnparsablePositionError
from aprsposition.position import Position

__all__ = ["parse_compressed"]

logger = logging.getLogger(__name__)

_BLOCK_LENGTH = 13
_MINIMUM_CHARACTER = 0x21
_MAXIMUM_CHARACTER = 0x7B

_LATITUDE_SCALE = 380926.0
_LONGITUDE_SCALE = 190463.0


def parse_compressed(payload: bytes, cursor: int) -> Position:
    """Decode a 13-byte compressed position block starting at ``cursor``.

    Raises:
        UnparsablePositionError: If the block is truncated or one of the
            eight coordinate characters lies outside ``0x21..0x7b``.
    """
    if len(payload) < cursor + _BLOCK_LENGTH:
        raise UnparsablePositionError("Compressed position too short")

    coordinates = payload[cursor + 1 : cursor + 9]
    for byte in coordinates:
        if not _MINIMUM_CHARACTER <= byte <= _MAXIMUM_CHARACTER:
            logger.debug("Compressed coordinate byte 0x%02x out of range", byte)
            raise UnparsablePositionError("Compressed position characters out of range")

    latitude = 90.0 - decode_base91(coordinates[:4]) / _LATITUDE_SCALE
    longitude = -180.0 + decode_base91(coordinates[4:]) / _LONGITUDE_SCALE
    return Position(
        latitude,
        longitude,
        0,
        chr(payload[cursor]),
        chr(payload[cursor + 9]),
    )
