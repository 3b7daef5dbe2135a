"""
FASTA file I/O for validated sequences.
"""

from genoseq.io.fasta import (
    read_fasta,
    write_fasta,
    FastaRecord,
    parse_fasta_string,
    parse_fasta_records,
)

__all__ = [
    "read_fasta",
    "write_fasta",
    "FastaRecord",
    "parse_fasta_string",
    "parse_fasta_records",
]
