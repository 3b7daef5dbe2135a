"""
Core sequence manipulation utilities.

String-level functions for complementation, transcription, translation
and motif search. The sequence classes in ``genoseq.sequence`` delegate
to these after validating their input.
"""

from typing import Mapping, Optional

from genoseq.utils.tables import (
    CODON_TABLE,
    DNA_COMPLEMENT,
    STOP_SYMBOL,
    TRANSCRIPTION,
    UNKNOWN_RESIDUE,
)


def complement(sequence: str, pairing: Optional[Mapping[str, str]] = None) -> str:
    """
    Get the base-paired complement of a sequence.

    Symbols are substituted position by position; the order is NOT reversed.
    Symbols missing from ``pairing`` are kept as they are.

    Args:
        sequence: Nucleotide sequence string
        pairing: Base-pairing table (defaults to DNA pairing)

    Returns:
        Complement sequence of the same length

    Example:
        >>> complement("TACGGCATTGAA")
        'ATGCCGTAACTT'
    """
    if pairing is None:
        pairing = DNA_COMPLEMENT
    return "".join(pairing.get(base, base) for base in sequence)


def transcribe(sequence: str) -> str:
    """
    Transcribe a DNA template strand into RNA.

    Each base is replaced by its RNA partner (A->U, T->A, C->G, G->C).

    Example:
        >>> transcribe("TACGGA")
        'AUGCCU'
    """
    return "".join(TRANSCRIPTION.get(base, base) for base in sequence)


def translate(
    sequence: str,
    codon_table: Optional[Mapping[str, str]] = None,
    stop_symbol: str = STOP_SYMBOL,
    unknown_symbol: str = UNKNOWN_RESIDUE,
) -> str:
    """
    Translate an RNA sequence to protein.

    Codons are read from offset 0 in steps of 3. Translation ends at the
    first stop codon, which is not included in the output. A trailing
    partial codon is ignored.

    Args:
        sequence: RNA sequence
        codon_table: Custom codon table (defaults to the standard code)
        stop_symbol: Table value that marks a stop codon
        unknown_symbol: Residue emitted for codons missing from the table

    Returns:
        Amino acid sequence

    Example:
        >>> translate("AUGUUUUAA")
        'MF'
        >>> translate("AUGGC")
        'M'
    """
    if codon_table is None:
        codon_table = CODON_TABLE

    protein = []
    for i in range(0, len(sequence) - 2, 3):
        aa = codon_table.get(sequence[i:i + 3], unknown_symbol)
        if aa == stop_symbol:
            break
        protein.append(aa)

    return "".join(protein)


def find_motif(sequence: str, motif: str) -> int:
    """
    Find the first occurrence of a literal motif.

    Args:
        sequence: Sequence to search
        motif: Contiguous pattern to look for

    Returns:
        0-based start of the first match, or -1 if the motif is absent.
        An empty motif matches at 0.

    Example:
        >>> find_motif("TACGGA", "CGG")
        2
        >>> find_motif("TACGGA", "AAA")
        -1
    """
    return sequence.find(motif)
