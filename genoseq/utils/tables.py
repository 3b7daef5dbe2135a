"""
Fixed lookup tables for base pairing, transcription and translation.

All tables are read-only mappings built once at import time.
"""

from types import MappingProxyType

STOP_SYMBOL = "*"
UNKNOWN_RESIDUE = "X"

# Base pairing (complementation)
DNA_COMPLEMENT = MappingProxyType({"A": "T", "T": "A", "G": "C", "C": "G"})
RNA_COMPLEMENT = MappingProxyType({"A": "U", "U": "A", "G": "C", "C": "G"})

# DNA template base -> RNA base
TRANSCRIPTION = MappingProxyType({"A": "U", "T": "A", "C": "G", "G": "C"})

# Standard genetic code (RNA codons)
CODON_TABLE = MappingProxyType({
    "UUU": "F", "UUC": "F", "UUA": "L", "UUG": "L",
    "UCU": "S", "UCC": "S", "UCA": "S", "UCG": "S",
    "UAU": "Y", "UAC": "Y", "UAA": "*", "UAG": "*",
    "UGU": "C", "UGC": "C", "UGA": "*", "UGG": "W",
    "CUU": "L", "CUC": "L", "CUA": "L", "CUG": "L",
    "CCU": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAU": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGU": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "AUU": "I", "AUC": "I", "AUA": "I", "AUG": "M",
    "ACU": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAU": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGU": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GUU": "V", "GUC": "V", "GUA": "V", "GUG": "V",
    "GCU": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAU": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGU": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})

START_CODONS = frozenset({"AUG"})
STOP_CODONS = frozenset(
    codon for codon, residue in CODON_TABLE.items() if residue == STOP_SYMBOL
)
