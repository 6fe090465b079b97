"""NMEA checksum handling for sentences relayed over APRS.

The checksum is the XOR of every character between ``$`` and ``*``,
written as two hexadecimal digits after the ``*``:

    $GPWPL,4610.586,N,00607.754,E,4*70
     ^------------------------------^ ^^
     XOR over these characters        checksum

Digipeaters and older trackers often relay the sentence with the ``*hh``
suffix cut off, so how strictly the checksum is enforced is a policy the
caller picks.
"""

import logging
import re
from enum import Enum

from aprsposition.errors import UnparsablePositionError

__all__ = ["ChecksumPolicy", "check_sentence_checksum", "sentence_checksum"]

logger = logging.getLogger(__name__)

_SUFFIX_PATTERN = re.compile(r"\*([0-9A-Fa-f]{2})\s*\Z")


class ChecksumPolicy(str, Enum):
    IGNORE = "ignore"
    # A missing suffix passes, a present one must match
    OPTIONAL = "optional"
    REQUIRED = "required"


def sentence_checksum(sentence: str) -> int:
    """XOR of the sentence body, excluding the leading ``$`` and any suffix.

    Example:
        >>> hex(sentence_checksum("$GPWPL,4610.586,N,00607.754,E,4"))
        '0x70'
    """
    body = sentence[1:] if sentence.startswith("$") else sentence
    body = body.split("*", 1)[0]
    result = 0
    for character in body:
        result ^= ord(character)
    return result


def check_sentence_checksum(sentence: str, policy: ChecksumPolicy) -> None:
    """Enforce ``policy`` on the ``*hh`` suffix of an NMEA sentence.

    Raises:
        UnparsablePositionError: "Missing NMEA checksum" when the policy is
            REQUIRED and the sentence has no ``*``, or "Bad NMEA checksum"
            when a suffix is present but malformed or wrong.
    """
    policy = ChecksumPolicy(policy)
    if policy is ChecksumPolicy.IGNORE:
        return

    match = _SUFFIX_PATTERN.search(sentence)
    if match is None:
        if "*" in sentence:
            raise UnparsablePositionError("Bad NMEA checksum")
        if policy is ChecksumPolicy.REQUIRED:
            raise UnparsablePositionError("Missing NMEA checksum")
        logger.debug("Accepting NMEA sentence relayed without checksum")
        return

    expected = sentence_checksum(sentence)
    provided = int(match.group(1), 16)
    if provided != expected:
        logger.debug("NMEA checksum %02X, computed %02X", provided, expected)
        raise UnparsablePositionError("Bad NMEA checksum")
