"""
FASTA sequence reader and writer.

A FASTA record is a header line starting with '>' (identifier, then an
optional free-text description) followed by zero or more sequence lines.
"""

import io
import logging
import re
from enum import Enum
from typing import IO, Dict, Iterable, Iterator, List, Optional, Union

from genoio.config import OptionsLike, resolve_options
from genoio.errors import FormatError, IoError, ValidationError
from genoio.io.lines import LineReader
from genoio.io.records import SequenceRecord
from genoio.results import END_OF_INPUT, Error, Ok, PullResult
from genoio.sequence.alphabet import first_invalid

_LOGGER = logging.getLogger(__name__)

_HEADER_SPLIT = re.compile(r"\s+")


class _State(Enum):
    AWAITING_HEADER = "awaiting_header"
    IN_BODY = "in_body"


class FastaReader:
    """
    Pull-based FASTA parser.

    Records are built one at a time as lines are read from the stream. Use
    ``pull()`` for tagged results or iterate for records with exceptions.

    Args:
        stream: Text or binary stream positioned at the start of FASTA data
        options: CodecOptions (or mapping) selecting alphabet, strictness and
            case folding

    Example:
        >>> reader = FastaReader(io.StringIO(">seq1 demo\\nACGT\\n"))
        >>> [record.id for record in reader]
        ['seq1']
    """

    def __init__(self, stream: IO, options: OptionsLike = None):
        self.options = resolve_options(options)
        self._lines = LineReader(stream)
        self._state = _State.AWAITING_HEADER
        self._id: Optional[str] = None
        self._description = ""
        self._header_line = 0
        self._chunks: List[str] = []
        self._warned = False
        self._finished = False
        self._error: Optional[Exception] = None
        self.records_read = 0
        self.record_line: Optional[int] = None

    def __iter__(self) -> Iterator[SequenceRecord]:
        return self

    def __next__(self) -> SequenceRecord:
        record = self._next_record()
        if record is None:
            raise StopIteration
        return record

    def pull(self) -> PullResult:
        """Return Ok(record), END_OF_INPUT or Error without raising."""
        try:
            record = self._next_record()
        except (IoError, FormatError, ValidationError) as exc:
            return Error.from_exception(exc)
        if record is None:
            return END_OF_INPUT
        return Ok(record)

    def _next_record(self) -> Optional[SequenceRecord]:
        if self._error is not None:
            raise self._error
        if self._finished:
            return None
        try:
            for line_number, text in self._lines:
                if text.startswith(">"):
                    pending = self._emit()
                    self._start(line_number, text[1:])
                    if pending is not None:
                        return pending
                elif not text.strip():
                    continue
                elif self._state is _State.AWAITING_HEADER:
                    raise FormatError("sequence data without header", line_number)
                else:
                    self._extend(line_number, text)
        except (IoError, FormatError, ValidationError) as exc:
            self._error = exc
            raise

        self._finished = True
        record = self._emit()
        _LOGGER.debug("Reached end of FASTA input after %d records", self.records_read)
        return record

    def _start(self, line_number: int, header: str) -> None:
        if "\r" in header:
            raise FormatError("header contains a carriage return", line_number)
        parts = _HEADER_SPLIT.split(header, maxsplit=1)
        if not parts[0]:
            raise FormatError("header without sequence identifier", line_number)
        self._id = parts[0]
        self._description = parts[1].strip() if len(parts) > 1 else ""
        self._header_line = line_number
        self._chunks = []
        self._warned = False
        self._state = _State.IN_BODY

    def _extend(self, line_number: int, text: str) -> None:
        chunk = "".join(text.split())
        # '>' would start a new header once the sequence is re-wrapped
        if ">" in chunk:
            raise ValidationError(
                "'>' is not allowed inside sequence data", line_number, character=">"
            )
        if not self._warned:
            position = first_invalid(chunk, self.options.alphabet)
            if position is not None:
                char = chunk[position]
                if self.options.strict:
                    raise ValidationError(
                        f"invalid character {char!r} for {self.options.alphabet.value} alphabet",
                        line_number,
                        character=char,
                    )
                _LOGGER.warning(
                    "Sequence %s has characters outside the %s alphabet (first %r on line %d)",
                    self._id, self.options.alphabet.value, char, line_number
                )
                self._warned = True
        self._chunks.append(chunk)

    def _emit(self) -> Optional[SequenceRecord]:
        if self._state is not _State.IN_BODY:
            return None
        sequence = "".join(self._chunks)
        if self.options.uppercase:
            sequence = sequence.upper()
        record = SequenceRecord(id=self._id, description=self._description, sequence=sequence)
        self._state = _State.AWAITING_HEADER
        self._chunks = []
        self.record_line = self._header_line
        self.records_read += 1
        _LOGGER.debug(
            "Parsed FASTA record %s (%d residues, header on line %d)",
            record.id, len(record), self._header_line
        )
        return record


def open_fasta(stream: IO, options: OptionsLike = None) -> FastaReader:
    """
    Read sequence records from a FASTA stream.

    Args:
        stream: Text or binary stream; opening and closing it is up to the caller
        options: Alphabet, strict mode and case folding

    Returns:
        FastaReader yielding SequenceRecord objects lazily

    Example:
        >>> with open("sequences.fasta") as handle:
        ...     for record in open_fasta(handle):
        ...         print(f"{record.id}: {len(record)} bp")
    """
    return FastaReader(stream, options)


def parse_fasta_string(content: str, options: OptionsLike = None) -> List[SequenceRecord]:
    """Parse FASTA format from a string."""
    return list(FastaReader(io.StringIO(content), options))


def fasta_to_dict(stream: IO, options: OptionsLike = None) -> Dict[str, SequenceRecord]:
    """
    Load a FASTA stream as dictionary mapping IDs to records.

    Raises:
        ValidationError: If an identifier occurs twice
    """
    reader = FastaReader(stream, options)
    records: Dict[str, SequenceRecord] = {}
    for record in reader:
        if record.id in records:
            raise ValidationError(
                f"duplicate sequence id {record.id!r}", reader.record_line
            )
        records[record.id] = record
    return records


class FastaWriter:
    """
    Write SequenceRecord objects as FASTA text.

    Args:
        stream: Text or binary output stream
        options: Only ``line_width`` is used by the writer
    """

    def __init__(self, stream: IO, options: OptionsLike = None):
        self.options = resolve_options(options)
        self._stream = stream
        self._binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
        self.records_written = 0

    def write(self, record: SequenceRecord) -> None:
        text = record.to_fasta(self.options.line_width) + "\n"
        try:
            self._stream.write(text.encode("utf-8") if self._binary else text)
        except OSError as exc:
            raise IoError(f"Failed to write FASTA record {record.id}: {exc}") from exc
        self.records_written += 1

    def write_records(self, records: Iterable[SequenceRecord]) -> int:
        for record in records:
            self.write(record)
        return self.records_written


def write_fasta(
    stream: IO,
    records: Union[SequenceRecord, Iterable[SequenceRecord]],
    options: OptionsLike = None
) -> int:
    """
    Write sequences to a FASTA stream.

    Args:
        stream: Output stream; the caller owns it
        records: Single record or iterable of SequenceRecord objects
        options: ``line_width`` sets the characters per sequence line

    Returns:
        Number of records written

    Example:
        >>> records = [SequenceRecord("seq1", "example", "ACGT")]
        >>> write_fasta(sys.stdout, records)
        >seq1 example
        ACGT
        1
    """
    if isinstance(records, SequenceRecord):
        records = [records]
    written = FastaWriter(stream, options).write_records(records)
    _LOGGER.debug("Wrote %d FASTA records", written)
    return written
