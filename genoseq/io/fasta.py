import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from genoseq.sequence.core import FASTA_MARKER, DNA_KIND, Sequence, SequenceKind, make_sequence

_LOGGER = logging.getLogger(__name__)


@dataclass
class FastaRecord:
    """
    Represents a single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Full description line (everything after '>')
        sequence: The raw symbols
    """
    id: str
    description: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f"{FASTA_MARKER}{self.description}\n{self.sequence}"

    def to_fasta(self, line_width: Optional[int] = None) -> str:
        """Format as FASTA text, wrapping symbol lines if ``line_width`` is set."""
        if line_width is not None and line_width < 1:
            raise ValueError(f"line_width must be positive, got {line_width}")
        if line_width is None or not self.sequence:
            return str(self)
        lines = [f"{FASTA_MARKER}{self.description}"]
        for i in range(0, len(self.sequence), line_width):
            lines.append(self.sequence[i:i + line_width])
        return "\n".join(lines)

    def to_sequence(self, kind: SequenceKind = DNA_KIND) -> Sequence:
        """Build a validated sequence of ``kind`` named after the full header."""
        return make_sequence(kind, self.description, self.sequence)

    @classmethod
    def from_sequence(cls, sequence: Sequence) -> "FastaRecord":
        identifier = sequence.identifier
        seq_id = identifier.split()[0] if identifier.strip() else ""
        return cls(seq_id, identifier, sequence.symbols)


def _open_file(filepath: Union[str, Path], mode: str = "rt"):
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode)
    return open(filepath, mode)


def parse_fasta_records(content: str) -> Iterator[FastaRecord]:
    """
    Parse FASTA formatted text into raw records.

    Multi-line symbol blocks are joined; blank lines are skipped.
    """
    current_header = None
    current_sequence: List[str] = []

    for line in content.split("\n"):
        line = line.strip()
        if not line:
            continue

        if line.startswith(FASTA_MARKER):
            if current_header is not None:
                yield _make_record(current_header, current_sequence)
            current_header = line[1:].strip()
            current_sequence = []
        else:
            current_sequence.append(line)

    if current_header is not None:
        yield _make_record(current_header, current_sequence)


def _make_record(header: str, lines: List[str]) -> FastaRecord:
    seq_id = header.split()[0] if header else ""
    return FastaRecord(id=seq_id, description=header, sequence="".join(lines))


def parse_fasta_string(
    content: str,
    kind: SequenceKind = DNA_KIND
) -> Iterator[Sequence]:
    """
    Parse FASTA text into validated sequences.

    Args:
        content: FASTA formatted string
        kind: Kind of every sequence in the text

    Yields:
        Sequences of ``kind``; the identifier is the full header line

    Raises:
        InvalidSymbol: If a record holds a symbol outside the kind's alphabet

    Example:
        >>> [s.symbols for s in parse_fasta_string(">seq1\\nTACGGA")]
        ['TACGGA']
    """
    for record in parse_fasta_records(content):
        yield record.to_sequence(kind)


def read_fasta(
    filepath: Union[str, Path],
    kind: SequenceKind = DNA_KIND
) -> Iterator[Sequence]:
    """
    Read validated sequences from a FASTA file.

    Supports both plain text and gzip-compressed files.

    Args:
        filepath: Path to FASTA file (.fasta, .fa, .fna, or .gz)
        kind: Kind of every sequence in the file

    Yields:
        Sequences of ``kind``
    """
    _LOGGER.debug("Reading %s sequences from %s", kind.name, filepath)
    with _open_file(filepath, "rt") as f:
        yield from parse_fasta_string(f.read(), kind=kind)


def write_fasta(
    sequences: Union[Sequence, Iterable[Sequence]],
    filepath: Union[str, Path],
    line_width: Optional[int] = None,
    compress: bool = False
) -> None:
    """
    Write sequences to a FASTA file.

    Args:
        sequences: Single sequence or iterable of sequences
        filepath: Output file path
        line_width: Wrap symbol lines at this width (None keeps one line)
        compress: If True, write gzip-compressed file

    Example:
        >>> write_fasta([DNASequence("seq1", "ACGT")], "output.fasta")
    """
    if line_width is not None and line_width < 1:
        raise ValueError(f"line_width must be positive, got {line_width}")
    if isinstance(sequences, Sequence):
        sequences = [sequences]

    filepath = Path(filepath)
    if compress and not filepath.suffix == ".gz":
        filepath = Path(str(filepath) + ".gz")

    opener = gzip.open if filepath.suffix == ".gz" else open

    count = 0
    with opener(filepath, "wt") as f:
        for sequence in sequences:
            f.write(FastaRecord.from_sequence(sequence).to_fasta(line_width) + "\n")
            count += 1
    _LOGGER.debug("Wrote %d sequences to %s", count, filepath)
