"""Decode failure raised by every APRS position decoder."""

__all__ = ["UnparsablePositionError"]


class UnparsablePositionError(ValueError):
    """A position field was malformed, out of range, or violated its grammar.

    The message names the failing check, e.g. ``"Bad latitude sign character"``
    or ``"Compressed position too short"``. Decoders never return a partially
    decoded position; they raise this instead and leave fallback decisions to
    the caller.
    """
