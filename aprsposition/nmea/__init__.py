"""NMEA 0183 sentences carried as APRS position reports."""

from aprsposition.nmea.checksum import (
    ChecksumPolicy,
    check_sentence_checksum,
    sentence_checksum,
)
from aprsposition.nmea.fields import SENTENCE_LAYOUTS, SentenceLayout
from aprsposition.nmea.sentence import parse_nmea

__all__ = [
    "SENTENCE_LAYOUTS",
    "ChecksumPolicy",
    "SentenceLayout",
    "check_sentence_checksum",
    "parse_nmea",
    "sentence_checksum",
]
