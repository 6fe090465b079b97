"""Success-or-fault result for callers that prefer values over exceptions."""

from dataclasses import dataclass

from aprsposition.position import Position

__all__ = ["ParseResult"]


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a decode attempt.

    Exactly one of ``position`` and ``fault`` is set. ``fault`` carries the
    same cause string an ``UnparsablePositionError`` would have raised.

    Example:
        >>> result = try_decode_position(b"!4903.50X/07201.75W-")
        >>> result.has_fault
        True
        >>> result.fault
        'Bad latitude sign character'
    """

    position: Position | None = None
    fault: str | None = None

    def __post_init__(self) -> None:
        if (self.position is None) == (self.fault is None):
            raise ValueError("ParseResult needs exactly one of position and fault")

    @classmethod
    def success(cls, position: Position) -> "ParseResult":
        return cls(position=position)

    @classmethod
    def failure(cls, fault: str) -> "ParseResult":
        return cls(fault=fault)

    @property
    def has_fault(self) -> bool:
        return self.fault is not None
