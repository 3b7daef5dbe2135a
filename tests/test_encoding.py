import numpy as np
import pytest

from genoseq import DNASequence, PeptideSequence, RNASequence
from genoseq.sequence import DNA_KIND, RNA_KIND, codon_usage, kmer_frequencies, one_hot_decode, one_hot_encode


def test_one_hot_shape_and_values():
    enc = one_hot_encode(DNASequence("s", "ACGT"))
    assert enc.shape == (4, 4)
    assert enc.dtype == np.float32
    np.testing.assert_array_equal(enc, np.eye(4, dtype=np.float32))


def test_one_hot_peptide_width(peptide):
    enc = one_hot_encode(peptide)
    assert enc.shape == (len(peptide), 20)
    assert enc.sum() == len(peptide)


def test_one_hot_empty_sequence():
    assert one_hot_encode(RNASequence("e", "")).shape == (0, 4)


def test_one_hot_decode_restores_kind():
    original = RNASequence("r", "AUGGCU")
    decoded = one_hot_decode(one_hot_encode(original), RNA_KIND, identifier="r")
    assert isinstance(decoded, RNASequence)
    assert decoded == original


def test_one_hot_decode_rejects_wrong_width():
    with pytest.raises(ValueError):
        one_hot_decode(np.zeros((3, 20)), DNA_KIND)


def test_kmer_counts():
    counts = kmer_frequencies(DNASequence("s", "AAAC"), k=2, normalize=False)
    assert counts.shape == (16,)
    # AA is the first 2-mer, AC the second
    assert counts[0] == 2
    assert counts[1] == 1
    assert counts.sum() == 3


def test_kmer_frequencies_normalised():
    freqs = kmer_frequencies(DNASequence("s", "ACGTACGT"), k=1)
    np.testing.assert_allclose(freqs, [0.25, 0.25, 0.25, 0.25])


def test_kmer_shorter_than_k():
    counts = kmer_frequencies(PeptideSequence("p", "M"), k=2)
    assert counts.shape == (400,)
    assert counts.sum() == 0


def test_kmer_rejects_non_positive_k():
    with pytest.raises(ValueError):
        kmer_frequencies(DNASequence("s", "ACGT"), k=0)


def test_codon_usage_stops_at_stop_codon():
    rna = RNASequence("r", "AUGAUGUUUUAAGGGAUG")
    assert codon_usage(rna) == {"AUG": 2, "UUU": 1}


def test_codon_usage_matches_translation(dna):
    rna = dna.transcribe_to_rna()
    assert sum(codon_usage(rna).values()) == len(rna.translate_to_peptide())
