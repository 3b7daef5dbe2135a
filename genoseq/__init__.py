"""
GenoSeq: validated biological sequences for Python

This package provides:
- Alphabet-checked DNA, RNA and peptide sequences
- Point mutation and motif search
- Complementation, transcription and codon translation
- FASTA rendering, reading and writing
- Numeric encodings of sequences (one-hot, k-mer)
"""

__version__ = "0.1.0"
__author__ = "GenoSeq Contributors"

from genoseq.errors import (
    GenoSeqError,
    InvalidSymbol,
    OutOfRange,
)

from genoseq.sequence import (
    Alphabet,
    Sequence,
    SequenceKind,
    DNASequence,
    RNASequence,
    PeptideSequence,
    DNA_KIND,
    RNA_KIND,
    PEPTIDE_KIND,
    make_sequence,
    one_hot_encode,
    kmer_frequencies,
)

from genoseq.io import (
    read_fasta,
    write_fasta,
    parse_fasta_string,
    FastaRecord,
)

from genoseq.utils import (
    complement,
    transcribe,
    translate,
    find_motif,
    CODON_TABLE,
)

__all__ = [
    # Errors
    "GenoSeqError",
    "InvalidSymbol",
    "OutOfRange",
    # Sequences
    "Alphabet",
    "Sequence",
    "SequenceKind",
    "DNASequence",
    "RNASequence",
    "PeptideSequence",
    "DNA_KIND",
    "RNA_KIND",
    "PEPTIDE_KIND",
    "make_sequence",
    # Encoding
    "one_hot_encode",
    "kmer_frequencies",
    # I/O
    "read_fasta",
    "write_fasta",
    "parse_fasta_string",
    "FastaRecord",
    # Utilities
    "complement",
    "transcribe",
    "translate",
    "find_motif",
    "CODON_TABLE",
]
