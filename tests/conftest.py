"""Shared test fixtures for GenoSeq tests."""

import pytest

from genoseq import DNASequence, RNASequence, PeptideSequence


@pytest.fixture
def dna():
    """Template strand used throughout the pipeline tests."""
    return DNASequence("seq1", "TACGGCATTGAA")


@pytest.fixture
def rna():
    """RNA with a stop codon after two residues."""
    return RNASequence("mrna", "AUGUUUUAA")


@pytest.fixture
def peptide():
    return PeptideSequence("pep", "MKTAYIAKQR")
