"""Uncompressed (fixed-width ASCII) APRS position decoder.

Uncompressed Position Format (19 bytes from the cursor):
    4903.50N/07201.75W-
    |      ||        ||
    |      ||        |+-- Symbol code
    |      ||        +-- Longitude hemisphere (E/W)
    |      |+--------+-- Longitude DDDMM.mm
    |      +-- Symbol table
    +------+-- Latitude DDMM.mm + hemisphere (N/S)

Position Ambiguity:
    Senders may blank trailing digits with spaces to reduce precision.
    The decoder substitutes the middle of the blanked range:

        "49 3.  N"  level 1 -> 4930.00  (lat offset 2 blank)
        "490 .  N"  level 2 -> 4905.00  (lat offset 3 blank)
        "4903.  N"  level 3 -> 4903.50  (lat offset 5 blank)
        "4903.5 N"  level 4 -> 4903.55  (lat offset 6 blank)

    Longitude applies the same table at offsets 12/13/15/16. When both
    coordinates are ambiguous the longitude level is the one reported.

Decoding Strategies (first success wins):
    1. Lenient: a regular expression over the raw payload that accepts the
       non-standard field widths real-world transmitters emit.
    2. Fixed: the standard byte offsets over the ambiguity-normalized block.
"""

import logging
import re
from collections.abc import Callable

from aprsposition.degmin import parse_degree_minutes
from aprsposition.errors import UnparsablePositionError
from aprsposition.position import Position

__all__ = ["parse_uncompressed"]

logger = logging.getLogger(__name__)

_BLOCK_LENGTH = 19
_LONGITUDE_OFFSET = 10

_TIMESTAMPED_TYPES = (b"/", b"@")
# DDHHMMz, DDHHMM/ or HHMMSSh; digits are ASCII only
_TIMESTAMP_PATTERN = re.compile(rb"([0-9]{2})([0-9]{2})([0-9]{2})([z/h])")

_LENIENT_PATTERN = re.compile(
    r"(\d{2,4}\.\d{2,5})([NnSs])(.)(\d{3,5}\.\d{2,5})([EeWw])(.).*",
    re.ASCII,
)

# (blank offset, digit substitutions, ambiguity level), checked in order
_AMBIGUITY_RULES = (
    (2, {2: "3", 3: "0", 5: "0", 6: "0"}, 1),
    (3, {3: "5", 5: "0", 6: "0"}, 2),
    (5, {5: "5", 6: "0"}, 3),
    (6, {6: "5"}, 4),
)


def _skip_timestamp(payload: bytes, cursor: int) -> int:
    """Return the cursor past a leading DHM/HMS timestamp, if there is one.

    Only packets whose data type identifier is ``/`` or ``@`` carry a
    timestamp. Zulu timestamps (``DDHHMMz``) are parsed for the log but
    not attached to the position; other forms are skipped unparsed.
    """
    if payload[:1] not in _TIMESTAMPED_TYPES:
        return cursor

    match = _TIMESTAMP_PATTERN.match(payload, cursor)
    if match is None:
        return cursor

    day, hour, minute, suffix = match.groups()
    if suffix == b"z":
        logger.debug(
            "Discarding zulu timestamp day %d %02d:%02d", int(day), int(hour), int(minute)
        )
    return match.end()


def _normalize_ambiguity(block: str) -> tuple[str, int]:
    """Replace blanked digits with midpoint digits.

    Returns a new buffer and the ambiguity level of the last rule applied.
    """
    buffer = list(block)
    ambiguity = 0
    for base in (0, _LONGITUDE_OFFSET):
        for blank, substitutions, level in _AMBIGUITY_RULES:
            if buffer[base + blank] != " ":
                continue
            for offset, digit in substitutions.items():
                buffer[base + offset] = digit
            ambiguity = level
    return "".join(buffer), ambiguity


def _decode_lenient(report: str, buffer: str, ambiguity: int) -> Position | None:
    match = _LENIENT_PATTERN.fullmatch(report)
    if match is None:
        return None

    latitude_text, latitude_sign, symbol_table, longitude_text, longitude_sign, symbol_code = (
        match.groups()
    )
    latitude = parse_degree_minutes(
        latitude_text, 0, latitude_text.index(".") - 2, len(latitude_text), True
    )
    longitude = parse_degree_minutes(
        longitude_text, 0, longitude_text.index(".") - 2, len(longitude_text), True
    )
    if latitude_sign in "Ss":
        latitude = -latitude
    if longitude_sign in "Ww":
        longitude = -longitude

    logger.debug("Lenient match: %s %s", latitude_text, longitude_text)
    return Position(latitude, longitude, ambiguity, symbol_table, symbol_code)


def _decode_fixed(report: str, buffer: str, ambiguity: int) -> Position | None:
    latitude = parse_degree_minutes(buffer, 0, 2, 7, True)
    latitude_sign = buffer[7]
    symbol_table = buffer[8]
    longitude = parse_degree_minutes(buffer, 9, 3, 8, True)
    longitude_sign = buffer[17]
    symbol_code = buffer[18]

    if latitude_sign in "Ss":
        latitude = -latitude
    elif latitude_sign not in "Nn":
        raise UnparsablePositionError("Bad latitude sign character")
    if longitude_sign in "Ww":
        longitude = -longitude
    elif longitude_sign not in "Ee":
        raise UnparsablePositionError("Bad longitude sign character")

    return Position(latitude, longitude, ambiguity, symbol_table, symbol_code)


_STRATEGIES: tuple[Callable[[str, str, int], Position | None], ...] = (
    _decode_lenient,
    _decode_fixed,
)


def parse_uncompressed(payload: bytes, cursor: int = 1) -> Position:
    """Decode an uncompressed position block.

    Args:
        payload: The APRS information field.
        cursor: Offset of the position block (or of its leading timestamp)
            within ``payload``. Defaults to 1, just past the data type
            identifier.

    Returns:
        The decoded position. Ambiguity reflects blanked digits found in the
        fixed 19-byte block.

    Raises:
        UnparsablePositionError: If fewer than 19 bytes follow the cursor,
            a coordinate is malformed, or a hemisphere character is invalid.

    Example:
        >>> parse_uncompressed(b"!4903.50N/07201.75W-")
        Position(latitude=49.05833, longitude=-72.02917, ambiguity=0, ...)
    """
    cursor = _skip_timestamp(payload, cursor)
    if len(payload) < cursor + _BLOCK_LENGTH:
        logger.debug("Uncompressed packet too short at cursor %d: %r", cursor, payload)
        raise UnparsablePositionError("Uncompressed packet too short")

    report = payload[cursor:].decode("latin-1")
    buffer, ambiguity = _normalize_ambiguity(report[:_BLOCK_LENGTH])

    for strategy in _STRATEGIES:
        position = strategy(report, buffer, ambiguity)
        if position is not None:
            return position
    raise UnparsablePositionError("Unrecognized uncompressed position")
