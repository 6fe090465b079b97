"""Base-91 digit codec used by the APRS compressed position format.

Each digit is a value in ``0..90`` written as the printable ASCII character
``chr(value + 33)``. Coordinates use four digits, most significant first:

    value = d1 * 91**3 + d2 * 91**2 + d3 * 91 + d4
"""

__all__ = ["decode_base91", "encode_base91"]

_RADIX = 91
_OFFSET = 33


def encode_base91(value: int, length: int = 4) -> str:
    """Encode a non-negative integer as ``length`` base-91 characters.

    Example:
        >>> encode_base91(15427503)
        '5L!!'
    """
    digits = []
    for position in range(length):
        digit, value = divmod(value, _RADIX ** (length - position - 1))
        digits.append(chr(digit + _OFFSET))
    return "".join(digits)


def decode_base91(data: bytes) -> int:
    """Combine base-91 characters into an integer, most significant first."""
    value = 0
    for byte in data:
        value = value * _RADIX + (byte - _OFFSET)
    return value
