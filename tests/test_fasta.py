import pytest

from genoseq import DNASequence, InvalidSymbol, PeptideSequence, RNASequence
from genoseq.io import FastaRecord, parse_fasta_records, parse_fasta_string, read_fasta, write_fasta
from genoseq.sequence import PEPTIDE_KIND, RNA_KIND


def test_parse_multiline_records():
    content = ">seq1 first\nTACG\nGCAT\n\n>seq2\nAAAA\n"
    records = list(parse_fasta_records(content))
    assert [r.id for r in records] == ["seq1", "seq2"]
    assert records[0].description == "seq1 first"
    assert records[0].sequence == "TACGGCAT"


def test_parse_fasta_string_builds_kind():
    seqs = list(parse_fasta_string(">r1\nAUGUUUUAA", kind=RNA_KIND))
    assert seqs == [RNASequence("r1", "AUGUUUUAA")]


def test_parse_fasta_string_validates():
    with pytest.raises(InvalidSymbol):
        list(parse_fasta_string(">bad\nACGU"))


def test_record_wrapping():
    record = FastaRecord("s", "s", "ACGTACGTAC")
    assert record.to_fasta() == ">s\nACGTACGTAC"
    assert record.to_fasta(line_width=4) == ">s\nACGT\nACGT\nAC"


def test_record_from_sequence_matches_render(dna):
    assert str(FastaRecord.from_sequence(dna)) == dna.render()


def test_write_then_read(tmp_path, dna):
    path = tmp_path / "seqs.fasta"
    write_fasta([dna, DNASequence("seq2", "ACGT")], path)
    assert path.read_text() == ">seq1\nTACGGCATTGAA\n>seq2\nACGT\n"
    assert list(read_fasta(path)) == [dna, DNASequence("seq2", "ACGT")]


def test_write_single_sequence_compressed(tmp_path, peptide):
    path = tmp_path / "pep.fa"
    write_fasta(peptide, path, compress=True, line_width=3)
    gz_path = tmp_path / "pep.fa.gz"
    assert gz_path.exists()
    assert list(read_fasta(gz_path, kind=PEPTIDE_KIND)) == [peptide]


def test_read_pipeline_output(tmp_path, dna):
    peptide = dna.transcribe_to_rna().translate_to_peptide()
    path = tmp_path / "protein.fasta"
    write_fasta(peptide, path)
    assert list(read_fasta(path, kind=PEPTIDE_KIND)) == [PeptideSequence("seq1_RNA_protein", "MP")]


def test_identifier_with_whitespace_survives_write_then_read(tmp_path):
    seq = DNASequence("chr1 sample", "ACGT")
    path = tmp_path / "spaced.fasta"
    write_fasta(seq, path)
    assert path.read_text() == seq.render() + "\n"
    assert list(read_fasta(path)) == [seq]


def test_record_keeps_first_word_as_id():
    record = FastaRecord.from_sequence(DNASequence("chr1 sample", "ACGT"))
    assert record.id == "chr1"
    assert record.to_sequence().identifier == "chr1 sample"


@pytest.mark.parametrize("width", [0, -3])
def test_non_positive_line_width_rejected(tmp_path, width):
    with pytest.raises(ValueError):
        FastaRecord("s", "s", "ACGT").to_fasta(line_width=width)
    path = tmp_path / "bad.fasta"
    with pytest.raises(ValueError):
        write_fasta(DNASequence("a", "ACGT"), path, line_width=width)
    assert not path.exists()
