"""
String-level sequence operations and lookup tables.

This module provides:
- Base-pairing complement (order preserved)
- DNA to RNA transcription
- Codon translation with early stop
- Literal motif search
"""

from genoseq.utils.sequences import (
    complement,
    transcribe,
    translate,
    find_motif,
)

from genoseq.utils.tables import (
    CODON_TABLE,
    DNA_COMPLEMENT,
    RNA_COMPLEMENT,
    TRANSCRIPTION,
    START_CODONS,
    STOP_CODONS,
    STOP_SYMBOL,
)

__all__ = [
    "complement",
    "transcribe",
    "translate",
    "find_motif",
    "CODON_TABLE",
    "DNA_COMPLEMENT",
    "RNA_COMPLEMENT",
    "TRANSCRIPTION",
    "START_CODONS",
    "STOP_CODONS",
    "STOP_SYMBOL",
]
