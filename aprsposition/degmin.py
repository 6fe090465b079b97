"""Fixed-width degree/minute field parser.

APRS and NMEA share the ``DDMM.mm`` (latitude) / ``DDDMM.mm`` (longitude)
notation: a run of whole-degree digits followed by decimal minutes. The
minute digits are weighted 10, 1, 0.1, 0.01, ... in order; a literal ``.``
may sit between the whole and fractional minutes.

    4903.50   -> 49 + 03.50 / 60  = 49.05833
    07201.75  -> 72 + 01.75 / 60  = 72.02917
    490350    -> 49 + 03.50 / 60  (Mic-E digits, no decimal point)
"""

from aprsposition.errors import UnparsablePositionError
from aprsposition.position import round_degrees

__all__ = ["parse_degree_minutes"]

_MAXIMUM_DEGREES = {2: 90.01, 3: 180.01}


def _digit_value(character: str) -> int:
    if not "0" <= character <= "9":
        raise UnparsablePositionError(f"Got {character!r} while looking for 0-9")
    return ord(character) - ord("0")


def parse_degree_minutes(
    text: str,
    cursor: int,
    deg_size: int,
    length: int,
    decimal_dot: bool,
) -> float:
    """Parse a degree/minute run into unsigned decimal degrees.

    Args:
        text: Buffer holding the field.
        cursor: Offset of the first degree digit within ``text``.
        deg_size: Number of whole-degree digits (2 for latitude, 3 for
            longitude in the standard layouts).
        length: Total field length including degrees and the decimal point.
            The minutes scan stops at whichever comes first, this length or
            the end of ``text``.
        decimal_dot: If True, the third minute character must be ``.``.

    Returns:
        Decimal degrees rounded to 1e-5.

    Raises:
        UnparsablePositionError: If the field is too short, holds a non-digit,
            has 60 or more minutes, or exceeds 90 (2-digit degrees) or 180
            (3-digit degrees).
    """
    if len(text) < cursor + deg_size + 2:
        raise UnparsablePositionError("Too short degmin data")

    degrees = 0.0
    for character in text[cursor : cursor + deg_size]:
        degrees = degrees * 10.0 + _digit_value(character)

    minute_length = min(len(text) - deg_size - cursor, length - deg_size)
    minute_factor = 10.0
    minutes = 0.0
    for index in range(minute_length):
        character = text[cursor + deg_size + index]
        if decimal_dot and index == 2:
            if character == ".":
                continue
            raise UnparsablePositionError(f"Expected decimal dot at pos {index}")
        minutes += minute_factor * _digit_value(character)
        minute_factor *= 0.1

    if minutes >= 60.0:
        raise UnparsablePositionError("Bad minutes value - 60.0 or over")

    result = round_degrees(degrees + minutes / 60.0)
    maximum = _MAXIMUM_DEGREES.get(deg_size)
    if maximum is not None and result > maximum:
        kind = "Latitude" if deg_size == 2 else "Longitude"
        raise UnparsablePositionError(f"{kind} value too high")
    return result
