"""
Exceptions raised by GenoSeq.

Both sequence errors also derive from the matching built-in exception, so
callers that already catch ``ValueError`` or ``IndexError`` keep working.
"""

from typing import Optional


class GenoSeqError(Exception):
    """Base class for all GenoSeq errors."""


class InvalidSymbol(GenoSeqError, ValueError):
    """
    A symbol is not part of the alphabet bound to a sequence.

    Attributes:
        symbol: The offending character
        position: 0-based position of the character, if known
        kind: Name of the sequence kind (e.g. "DNA")
    """

    def __init__(self, symbol: str, position: Optional[int] = None, kind: str = ""):
        self.symbol = symbol
        self.position = position
        self.kind = kind
        where = f" at position {position}" if position is not None else ""
        label = f"{kind} " if kind else ""
        super().__init__(f"Invalid {label}symbol {symbol!r}{where}")


class OutOfRange(GenoSeqError, IndexError):
    """
    A position lies outside ``[0, length)``.

    Attributes:
        position: The requested position
        length: Length of the sequence at the time of the request
    """

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(
            f"Position {position} out of range for sequence of length {length}"
        )
