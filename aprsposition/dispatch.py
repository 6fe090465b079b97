r"""Pick the position decoder for an APRS information field.

The first byte of the information field is the data type identifier:

    !  =     position without timestamp          -> cursor 1
    /  @     position with 7-byte timestamp      -> cursor 8
    ` ' 0x1c 0x1d  Mic-E (needs the destination call)
    $        raw NMEA sentence

For ``!``, ``=``, ``/`` and ``@`` the position itself is compressed when it
starts with a compressed symbol table selector (``/``, ``\``, ``A-Z``,
``a-j``); uncompressed positions always start with a latitude digit.
"""

import logging

from aprsposition.compressed import parse_compressed
from aprsposition.errors import UnparsablePositionError
from aprsposition.mic_e import parse_mic_e
from aprsposition.nmea import ChecksumPolicy, parse_nmea
from aprsposition.position import Position
from aprsposition.result import ParseResult
from aprsposition.uncompressed import parse_uncompressed

__all__ = ["decode_position", "is_compressed", "try_decode_position"]

logger = logging.getLogger(__name__)

_POSITION_TYPES = b"!="
_TIMESTAMPED_POSITION_TYPES = b"/@"
_MIC_E_TYPES = b"`'\x1c\x1d"
_NMEA_TYPE = ord("$")

_TIMESTAMP_LENGTH = 7


def is_compressed(payload: bytes, cursor: int) -> bool:
    """Whether the position at ``cursor`` uses the compressed format.

    Example:
        >>> is_compressed(b"!/5L!!<*e7>7P[", 1)
        True
        >>> is_compressed(b"!4903.50N/07201.75W-", 1)
        False
    """
    if len(payload) <= cursor:
        return False
    table = chr(payload[cursor])
    return table in "/\\" or "A" <= table <= "Z" or "a" <= table <= "j"


def _decode_report(payload: bytes, cursor: int) -> Position:
    if is_compressed(payload, cursor):
        return parse_compressed(payload, cursor)
    return parse_uncompressed(payload, cursor)


def decode_position(
    payload: bytes,
    destination: str | None = None,
    nmea_checksum: ChecksumPolicy = ChecksumPolicy.IGNORE,
) -> Position:
    """Decode the position in an APRS information field.

    Args:
        payload: The information field, data type identifier first.
        destination: The AX.25 destination call. Required for Mic-E.
        nmea_checksum: Checksum policy applied to raw NMEA sentences.

    Returns:
        The decoded position.

    Raises:
        UnparsablePositionError: If the data type does not carry a position
            or the selected decoder rejects the payload.
    """
    if not payload:
        raise UnparsablePositionError("Empty information field")

    data_type = payload[0]
    if data_type in _POSITION_TYPES:
        return _decode_report(payload, 1)
    if data_type in _TIMESTAMPED_POSITION_TYPES:
        cursor = 1 + _TIMESTAMP_LENGTH
        if is_compressed(payload, cursor):
            return parse_compressed(payload, cursor)
        # The uncompressed decoder skips the timestamp itself
        return parse_uncompressed(payload, 1)
    if data_type in _MIC_E_TYPES:
        if not destination:
            raise UnparsablePositionError("MicE position needs a destination call")
        return parse_mic_e(payload, destination)
    if data_type == _NMEA_TYPE:
        return parse_nmea(payload, nmea_checksum)

    raise UnparsablePositionError(f"Unsupported data type identifier {chr(data_type)!r}")


def try_decode_position(
    payload: bytes,
    destination: str | None = None,
    nmea_checksum: ChecksumPolicy = ChecksumPolicy.IGNORE,
) -> ParseResult:
    """Like ``decode_position`` but reports failures as a ``ParseResult``."""
    try:
        return ParseResult.success(decode_position(payload, destination, nmea_checksum))
    except UnparsablePositionError as exc:
        logger.debug("Position decode failed: %s", exc)
        return ParseResult.failure(str(exc))
