"""Mic-E position decoder.

Mic-E splits a position across two places:

Destination call (6 characters, SSID stripped):
    490S5P
    ||||||
    |||||+-- Longitude minute hundredths digit; P-Z means West
    ||||+-- Minute tenths digit; P-Z adds 100 to the longitude degrees
    |||+-- Minute units digit; P-Z means North
    +++-- Latitude degrees and minute tens

    Each character is a digit written as 0-9, A-J or P-Y. K, L and Z blank
    the digit (position ambiguity).

Information field (first 9 bytes):
    `dYgl([>/
    ||||||||+-- Symbol table
    |||||||+-- Symbol code
    ||||+++-- Speed and course (not decoded here)
    |||+-- Longitude minute hundredths + 28
    ||+-- Longitude minutes + 28 (values 60+ wrap)
    |+-- Longitude degrees + 28
    +-- Data type identifier
"""

import logging

from aprsposition.degmin import parse_degree_minutes
from aprsposition.errors import UnparsablePositionError
from aprsposition.position import Position

__all__ = ["parse_mic_e"]

logger = logging.getLogger(__name__)

_DESTINATION_LENGTH = 6
_MINIMUM_PAYLOAD_LENGTH = 9
_BYTE_OFFSET = 28
_AMBIGUOUS = "_"

# Acceptable byte ranges for information field offsets 1..7
_BYTE_RANGES = (
    ((0x26, 0x7F),),
    ((0x26, 0x61),),
    ((0x1C, 0x7F),),
    ((0x1C, 0x7F),),
    ((0x1C, 0x7D),),
    ((0x1C, 0x7F),),
    ((0x21, 0x7B), (0x7D, 0x7D)),
)

# Latitude digit index -> (ambiguity level, midpoint digit), last to first
_AMBIGUITY_DIGITS = (
    (5, 4, "5"),
    (4, 3, "5"),
    (3, 2, "5"),
    (2, 1, "3"),
)


def _is_latitude_digit(character: str, allow_message_bits: bool) -> bool:
    if "0" <= character <= "9" or "P" <= character <= "Z" or character == "L":
        return True
    return allow_message_bits and "A" <= character <= "K"


def _validate_destination(destination: str) -> None:
    for index in range(1, _DESTINATION_LENGTH):
        character = destination[index]
        if not _is_latitude_digit(character, allow_message_bits=index <= 3):
            raise UnparsablePositionError(f"Digit {index - 1} dorked: {character}")


def _is_uncompressed_symbol_table(character: str) -> bool:
    return character in "/\\" or "A" <= character <= "Z" or "0" <= character <= "9"


def _validate_information_field(payload: bytes) -> None:
    for position, ranges in enumerate(_BYTE_RANGES, start=1):
        byte = payload[position]
        if not any(low <= byte <= high for low, high in ranges):
            raise UnparsablePositionError(
                f"Raw packet contains {chr(byte)!r} at position {position}"
            )
    symbol_table = chr(payload[8])
    if not _is_uncompressed_symbol_table(symbol_table):
        raise UnparsablePositionError(f"Raw packet contains {symbol_table!r} at position 8")


def _remap_digit(character: str) -> str:
    if "A" <= character <= "J":
        return chr(ord(character) - ord("A") + ord("0"))
    if "P" <= character <= "Y":
        return chr(ord(character) - ord("P") + ord("0"))
    if character in "KLZ":
        return _AMBIGUOUS
    return character


def _extract_latitude_digits(destination: str) -> tuple[str, int]:
    """Remap the destination call into six latitude digits and an ambiguity level."""
    digits = [_remap_digit(character) for character in destination]
    ambiguity = 0
    for index, level, midpoint in _AMBIGUITY_DIGITS:
        if digits[index] == _AMBIGUOUS:
            digits[index] = midpoint
            ambiguity = level
    if _AMBIGUOUS in (digits[0], digits[1]):
        raise UnparsablePositionError("bad pos-ambiguity on destcall")
    return "".join(digits), ambiguity


def _decode_longitude(payload: bytes, destination: str, ambiguity: int) -> float:
    degrees = payload[1] - _BYTE_OFFSET
    if destination[4] >= "P":
        degrees += 100
    if 180 <= degrees <= 189:
        degrees -= 80
    elif 190 <= degrees <= 199:
        degrees -= 190

    minutes = payload[2] - _BYTE_OFFSET
    if minutes >= 60:
        minutes -= 60
    hundredths = payload[3] - _BYTE_OFFSET

    if ambiguity == 0:
        longitude = degrees + minutes / 60.0 + hundredths / 6000.0
    elif ambiguity == 1:
        longitude = degrees + minutes / 60.0 + (hundredths - hundredths % 10 + 5) / 6000.0
    elif ambiguity == 2:
        longitude = degrees + minutes / 60.0
    elif ambiguity == 3:
        longitude = degrees + (minutes - minutes % 10 + 5) / 60.0
    elif ambiguity == 4:
        longitude = degrees + 0.5
    else:
        raise UnparsablePositionError("Unable to extract longitude from MicE")

    if destination[5] >= "P":
        longitude = -longitude
    return longitude


def parse_mic_e(payload: bytes, destination_call: str) -> Position:
    """Decode a Mic-E position.

    Args:
        payload: The information field, starting with the data type
            identifier (`` ` ``, ``'``, 0x1c or 0x1d).
        destination_call: AX.25 destination call, optionally with an SSID
            suffix (``"490S5P-2"``).

    Returns:
        The decoded position. Symbol table and code come from payload bytes
        8 and 7 respectively.

    Raises:
        UnparsablePositionError: If the destination call is not a valid
            Mic-E latitude, or an information field byte is out of range.

    Example:
        >>> parse_mic_e(b"`dYgl([>/", "490S5P")
        Position(latitude=49.05833, longitude=-72.02917, ambiguity=0, ...)
    """
    destination = destination_call.split("-", 1)[0]
    if len(destination) != _DESTINATION_LENGTH:
        raise UnparsablePositionError(
            f"MicE Destination Call incorrect length: {destination}"
        )
    _validate_destination(destination)

    if len(payload) < _MINIMUM_PAYLOAD_LENGTH:
        raise UnparsablePositionError("MicE packet too short")
    _validate_information_field(payload)

    digits, ambiguity = _extract_latitude_digits(destination)
    try:
        latitude = parse_degree_minutes(digits, 0, 2, 9, False)
    except UnparsablePositionError as exc:
        logger.debug("Mic-E latitude digits %r rejected: %s", digits, exc)
        raise UnparsablePositionError(
            f"Destination Call invalid for MicE: {digits}"
        ) from exc
    if destination[3] <= "L":
        latitude = -latitude

    longitude = _decode_longitude(payload, destination, ambiguity)
    return Position(
        latitude,
        longitude,
        ambiguity,
        chr(payload[8]),
        chr(payload[7]),
    )
