"""
Symbol alphabets for the supported sequence kinds.

The declared symbol order is significant: it is the column order used by the
numeric encodings in ``genoseq.sequence.encoding``.
"""

from typing import Iterator

from genoseq.errors import GenoSeqError


class AlphabetError(GenoSeqError, ValueError):
    pass


class Alphabet:
    """
    An immutable set of single-character symbols.

    Args:
        symbols: The legal symbols, in a fixed order

    Example:
        >>> dna = Alphabet("ACGT")
        >>> "G" in dna
        True
        >>> dna.contains("U")
        False
    """

    def __init__(self, symbols: str):
        if not symbols:
            raise AlphabetError("Alphabet must contain at least one symbol")
        self._symbols = symbols
        self._set = frozenset(symbols)
        if len(self._set) < len(symbols):
            raise AlphabetError(f'Alphabet symbols "{symbols}" are not unique')

    def contains(self, symbol: str) -> bool:
        """Return True if ``symbol`` is a single character of this alphabet."""
        return symbol in self._set

    def index(self, symbol: str) -> int:
        return self._symbols.index(symbol)

    def __contains__(self, symbol: str) -> bool:
        return self.contains(symbol)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f"Alphabet({self._symbols!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Alphabet):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)


# Standard alphabets
DNA = Alphabet("ACGT")
RNA = Alphabet("ACGU")
PEPTIDE = Alphabet("ACDEFGHIKLMNPQRSTVWY")  # 20 standard amino acids
