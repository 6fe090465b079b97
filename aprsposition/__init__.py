"""APRS position codec: uncompressed, compressed, Mic-E and NMEA decoders."""

from aprsposition.compressed import parse_compressed
from aprsposition.degmin import parse_degree_minutes
from aprsposition.dispatch import decode_position, is_compressed, try_decode_position
from aprsposition.errors import UnparsablePositionError
from aprsposition.mic_e import parse_mic_e
from aprsposition.nmea import ChecksumPolicy, parse_nmea
from aprsposition.position import Position, dist_from, round_degrees
from aprsposition.result import ParseResult
from aprsposition.uncompressed import parse_uncompressed

__all__ = [
    "ChecksumPolicy",
    "ParseResult",
    "Position",
    "UnparsablePositionError",
    "decode_position",
    "dist_from",
    "is_compressed",
    "parse_compressed",
    "parse_degree_minutes",
    "parse_mic_e",
    "parse_nmea",
    "parse_uncompressed",
    "round_degrees",
    "try_decode_position",
]
