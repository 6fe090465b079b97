"""Sentence layouts for the NMEA sentences that carry an APRS position.

Each layout names the comma-separated field indices holding the latitude,
longitude and their hemisphere letters, plus the gate a sentence must pass
before its coordinates are trusted:

    $GPRMC,175050,A,4117.8935,N,10535.0871,W,0.0,324.3,100208,10.0,E,A*3B
     [0]    [1]  [2]   [3]   [4]   [5]    [6]
                  |
                  +-- status gate: "A" = valid fix, "V" = invalid
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["IGNORED_SENTENCES", "SENTENCE_LAYOUTS", "SentenceLayout"]


@dataclass(frozen=True)
class SentenceLayout:
    """Where one sentence type keeps its position.

    Attributes:
        minimum_fields: Smallest field count the sentence may have.
        latitude: Index of the DDMM.mmmm latitude field.
        latitude_sign: Index of the N/S field.
        longitude: Index of the DDDMM.mmmm longitude field.
        longitude_sign: Index of the E/W field.
        gate: Returns a failure cause if the fix must be rejected, else None.
    """

    minimum_fields: int
    latitude: int
    latitude_sign: int
    longitude: int
    longitude_sign: int
    gate: Callable[[list[str]], str | None]


def _gga_gate(fields: list[str]) -> str | None:
    # Fix quality 1 = GPS fix; DGPS and RTK fixes are not accepted
    if fields[6] != "1":
        return "Not a valid position fix"
    return None


def _gll_gate(fields: list[str]) -> str | None:
    # Status "A" (valid) and mode "A" (autonomous)
    if fields[6] != "A" or not fields[7].startswith("A"):
        return "Not valid or not autonomous NMEA sentence"
    return None


def _rmc_gate(fields: list[str]) -> str | None:
    if fields[2] != "A":
        return "Not valid or not autonomous NMEA sentence"
    return None


def _no_gate(fields: list[str]) -> str | None:
    return None


SENTENCE_LAYOUTS: dict[str, SentenceLayout] = {
    "$GPGGA": SentenceLayout(15, 2, 3, 4, 5, _gga_gate),
    "$GPGLL": SentenceLayout(8, 1, 2, 3, 4, _gll_gate),
    "$GPRMC": SentenceLayout(12, 3, 4, 5, 6, _rmc_gate),
    "$GPWPL": SentenceLayout(6, 1, 2, 3, 4, _no_gate),
    # Alinco EJ-41U private sentence; field 1 is the format version.
    # The version gate is applied before the layout is selected.
    "$PNTS": SentenceLayout(16, 7, 8, 9, 10, _no_gate),
}

# Recognized, but never carry a usable position
IGNORED_SENTENCES = ("$GPGSA", "$GPVTG", "$GPGSV")
