"""
Validated biological sequences.

A single ``Sequence`` type holds the identifier and symbols of a DNA, RNA
or peptide sequence. What differs between kinds (alphabet and base-pairing
table) lives in a ``SequenceKind`` record, and the thin subclasses only add
the derivation step each kind supports:

    DNASequence --transcribe_to_rna--> RNASequence --translate_to_peptide--> PeptideSequence
"""

import logging
import operator
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from genoseq.errors import InvalidSymbol, OutOfRange
from genoseq.sequence.alphabet import DNA, PEPTIDE, RNA, Alphabet
from genoseq.utils import sequences as ops
from genoseq.utils.tables import DNA_COMPLEMENT, RNA_COMPLEMENT

_LOGGER = logging.getLogger(__name__)

FASTA_MARKER = ">"
RNA_SUFFIX = "_RNA"
PROTEIN_SUFFIX = "_protein"


@dataclass(frozen=True)
class SequenceKind:
    """
    Per-kind configuration of a sequence.

    Attributes:
        name: Display name (e.g. "DNA")
        alphabet: Legal symbols
        pairing: Base-pairing table, or None if the kind cannot be complemented
    """
    name: str
    alphabet: Alphabet
    pairing: Optional[Mapping[str, str]] = field(default=None, compare=False)


DNA_KIND = SequenceKind("DNA", DNA, DNA_COMPLEMENT)
RNA_KIND = SequenceKind("RNA", RNA, RNA_COMPLEMENT)
PEPTIDE_KIND = SequenceKind("Peptide", PEPTIDE)


class Sequence:
    """
    An identified, alphabet-checked sequence of symbols.

    Every symbol is validated against the kind's alphabet on construction
    and on every mutation.

    Args:
        kind: Kind record binding the alphabet
        identifier: Sequence label
        symbols: Sequence symbols (may be empty)

    Raises:
        InvalidSymbol: If a symbol is not in the alphabet

    Example:
        >>> seq = Sequence(DNA_KIND, "seq1", "TACGGA")
        >>> print(seq.render())
        >seq1
        TACGGA
    """

    def __init__(self, kind: SequenceKind, identifier: str, symbols: str = ""):
        self._kind = kind
        self._identifier = identifier
        self._symbols: List[str] = list(symbols)
        for i, symbol in enumerate(self._symbols):
            if not kind.alphabet.contains(symbol):
                raise InvalidSymbol(symbol, i, kind.name)

    @property
    def kind(self) -> SequenceKind:
        return self._kind

    @property
    def alphabet(self) -> Alphabet:
        return self._kind.alphabet

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def symbols(self) -> str:
        return "".join(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._identifier!r}, {self.symbols!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._identifier == other._identifier
            and self._symbols == other._symbols
        )

    __hash__ = None  # mutable

    def render(self) -> str:
        """Two-line FASTA form: ``>identifier`` then the raw symbols."""
        return f"{FASTA_MARKER}{self._identifier}\n{self.symbols}"

    def mutate(self, position: int, symbol: str) -> None:
        """
        Replace the symbol at ``position`` in place.

        The position is checked before the symbol, so an out-of-range
        position is reported even when the symbol is also invalid.

        Raises:
            TypeError: If position is not an integer
            OutOfRange: If position is not in [0, len(self))
            InvalidSymbol: If symbol is not in the alphabet
        """
        position = operator.index(position)
        if not 0 <= position < len(self._symbols):
            raise OutOfRange(position, len(self._symbols))
        if not self._kind.alphabet.contains(symbol):
            raise InvalidSymbol(symbol, position, self._kind.name)
        _LOGGER.debug(
            "Mutating %s[%d]: %s -> %s",
            self._identifier, position, self._symbols[position], symbol,
        )
        self._symbols[position] = symbol

    def find_motif(self, motif: str) -> int:
        """Index of the first occurrence of ``motif``, or -1 if absent."""
        return ops.find_motif(self.symbols, motif)

    def complement(self) -> "Sequence":
        """
        Base-paired complement, same kind and identifier.

        Symbols are substituted in their original order; the result is not reversed.

        Raises:
            TypeError: If the kind has no base-pairing table
        """
        if self._kind.pairing is None:
            raise TypeError(f"{self._kind.name} sequences cannot be complemented")
        paired = ops.complement(self.symbols, self._kind.pairing)
        return make_sequence(self._kind, self._identifier, paired)

    def copy(self) -> "Sequence":
        """Independent copy with the same kind, identifier and symbols."""
        return make_sequence(self._kind, self._identifier, self.symbols)


class DNASequence(Sequence):
    """
    A DNA sequence over A, C, G, T.

    Example:
        >>> DNASequence("seq1", "TACGGA").transcribe_to_rna().symbols
        'AUGCCU'
    """

    def __init__(self, identifier: str, symbols: str = ""):
        super().__init__(DNA_KIND, identifier, symbols)

    def transcribe_to_rna(self) -> "RNASequence":
        """Transcribe to RNA (A->U, T->A, C->G, G->C); identifier gains ``_RNA``."""
        rna = RNASequence(self.identifier + RNA_SUFFIX, ops.transcribe(self.symbols))
        _LOGGER.debug("Transcribed %s (%d nt) -> %s", self.identifier, len(self), rna.identifier)
        return rna


class RNASequence(Sequence):
    """
    An RNA sequence over A, C, G, U.
    """

    def __init__(self, identifier: str, symbols: str = ""):
        super().__init__(RNA_KIND, identifier, symbols)

    def translate_to_peptide(self) -> "PeptideSequence":
        """
        Translate codon by codon with the standard genetic code.

        Translation ends at the first stop codon; a trailing partial codon
        is dropped. The identifier gains ``_protein``.
        """
        residues = ops.translate(self.symbols)
        _LOGGER.debug(
            "Translated %s (%d nt) -> %d residues",
            self.identifier, len(self), len(residues),
        )
        return PeptideSequence(self.identifier + PROTEIN_SUFFIX, residues)


class PeptideSequence(Sequence):
    """
    A peptide over the 20 standard amino-acid letters.
    """

    def __init__(self, identifier: str, symbols: str = ""):
        super().__init__(PEPTIDE_KIND, identifier, symbols)


_KIND_TYPES = {
    DNA_KIND: DNASequence,
    RNA_KIND: RNASequence,
    PEPTIDE_KIND: PeptideSequence,
}


def make_sequence(kind: SequenceKind, identifier: str, symbols: str = "") -> Sequence:
    """Construct a sequence of ``kind``, using its specialised class when there is one."""
    cls = _KIND_TYPES.get(kind)
    if cls is None:
        return Sequence(kind, identifier, symbols)
    return cls(identifier, symbols)
