"""
Numeric encodings of validated sequences.

Column and k-mer order follow the declared order of the sequence's
alphabet, so encodings of the same kind are always comparable.
"""

import numpy as np
from typing import Dict, List
from itertools import product

from genoseq.sequence.core import RNASequence, Sequence, SequenceKind, make_sequence
from genoseq.utils.tables import CODON_TABLE, STOP_SYMBOL


def one_hot_encode(sequence: Sequence) -> np.ndarray:
    """
    One-hot encode a sequence over its own alphabet.

    Args:
        sequence: Any validated sequence

    Returns:
        numpy array of shape (len(sequence), len(alphabet))

    Example:
        >>> one_hot_encode(DNASequence("s", "ACG"))
        array([[1., 0., 0., 0.],
               [0., 1., 0., 0.],
               [0., 0., 1., 0.]], dtype=float32)
    """
    alphabet = sequence.alphabet
    encoding = np.zeros((len(sequence), len(alphabet)), dtype=np.float32)
    for i, symbol in enumerate(sequence.symbols):
        encoding[i, alphabet.index(symbol)] = 1.0
    return encoding


def one_hot_decode(
    encoding: np.ndarray,
    kind: SequenceKind,
    identifier: str = "decoded"
) -> Sequence:
    """
    Decode a one-hot array back into a sequence of ``kind``.

    Each row is decoded to the symbol with the highest value.

    Args:
        encoding: Array of shape (seq_len, len(kind.alphabet))
        kind: Kind of the decoded sequence
        identifier: Identifier of the decoded sequence

    Returns:
        A new sequence of the given kind
    """
    encoding = np.asarray(encoding)
    symbols = list(kind.alphabet)
    if encoding.ndim != 2 or encoding.shape[1] != len(symbols):
        raise ValueError(
            f"Expected shape (n, {len(symbols)}) for {kind.name}, got {encoding.shape}"
        )
    decoded = "".join(symbols[idx] for idx in np.argmax(encoding, axis=1))
    return make_sequence(kind, identifier, decoded)


def generate_kmers(k: int, alphabet: str) -> List[str]:
    """Generate all possible k-mers from an alphabet."""
    return ["".join(kmer) for kmer in product(alphabet, repeat=k)]


def kmer_frequencies(
    sequence: Sequence,
    k: int = 3,
    normalize: bool = True
) -> np.ndarray:
    """
    Compute the k-mer frequency vector of a sequence.

    Args:
        sequence: Any validated sequence
        k: Length of k-mers
        normalize: If True, return frequencies; if False, return counts

    Returns:
        numpy array of shape (len(alphabet) ** k,), one entry per k-mer in
        lexicographic alphabet order
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")

    all_kmers = generate_kmers(k, str(sequence.alphabet))
    kmer_to_idx = {kmer: i for i, kmer in enumerate(all_kmers)}
    counts = np.zeros(len(all_kmers), dtype=np.float32)

    symbols = sequence.symbols
    for i in range(len(symbols) - k + 1):
        counts[kmer_to_idx[symbols[i:i + k]]] += 1

    if normalize and counts.sum() > 0:
        counts /= counts.sum()

    return counts


def codon_usage(sequence: RNASequence) -> Dict[str, int]:
    """
    Count the in-frame codons read before the first stop codon.

    Uses the same reading frame as ``RNASequence.translate_to_peptide``.

    Example:
        >>> codon_usage(RNASequence("r", "AUGAUGUAAGGG"))
        {'AUG': 2}
    """
    counts: Dict[str, int] = {}
    symbols = sequence.symbols
    for i in range(0, len(symbols) - 2, 3):
        codon = symbols[i:i + 3]
        if CODON_TABLE.get(codon) == STOP_SYMBOL:
            break
        counts[codon] = counts.get(codon, 0) + 1
    return counts
