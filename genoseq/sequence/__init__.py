"""
Validated sequences and their numeric encodings.

This module provides:
- Alphabets for DNA, RNA and peptides
- The generic Sequence type and its DNA/RNA/peptide specialisations
- One-hot and k-mer encodings driven by a sequence's alphabet
"""

from genoseq.sequence.alphabet import (
    Alphabet,
    AlphabetError,
    DNA,
    RNA,
    PEPTIDE,
)

from genoseq.sequence.core import (
    Sequence,
    SequenceKind,
    DNASequence,
    RNASequence,
    PeptideSequence,
    DNA_KIND,
    RNA_KIND,
    PEPTIDE_KIND,
    make_sequence,
)

from genoseq.sequence.encoding import (
    one_hot_encode,
    one_hot_decode,
    kmer_frequencies,
    codon_usage,
)

__all__ = [
    "Alphabet",
    "AlphabetError",
    "DNA",
    "RNA",
    "PEPTIDE",
    "Sequence",
    "SequenceKind",
    "DNASequence",
    "RNASequence",
    "PeptideSequence",
    "DNA_KIND",
    "RNA_KIND",
    "PEPTIDE_KIND",
    "make_sequence",
    "one_hot_encode",
    "one_hot_decode",
    "kmer_frequencies",
    "codon_usage",
]
