import pytest

from genoseq.sequence.alphabet import DNA, PEPTIDE, RNA, Alphabet, AlphabetError


def test_standard_alphabets():
    assert set(DNA) == set("ACGT")
    assert set(RNA) == set("ACGU")
    assert len(PEPTIDE) == 20


@pytest.mark.parametrize("symbol", ["A", "C", "G", "T"])
def test_dna_contains_bases(symbol):
    assert DNA.contains(symbol)
    assert symbol in DNA


@pytest.mark.parametrize("symbol", ["U", "a", "N", "", "AC", "-"])
def test_dna_rejects_other_symbols(symbol):
    assert not DNA.contains(symbol)


def test_peptide_has_no_placeholder_residue():
    assert "X" not in PEPTIDE
    assert "*" not in PEPTIDE


def test_empty_alphabet_rejected():
    with pytest.raises(AlphabetError):
        Alphabet("")


def test_duplicate_symbols_rejected():
    with pytest.raises(AlphabetError):
        Alphabet("AAC")


def test_index_follows_declared_order():
    assert [DNA.index(s) for s in "ACGT"] == [0, 1, 2, 3]


def test_equality_and_hash():
    assert Alphabet("ACGT") == DNA
    assert hash(Alphabet("ACGT")) == hash(DNA)
    assert Alphabet("ACGU") != DNA
