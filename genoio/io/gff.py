"""
GFF3 annotation reader and writer.

Each feature line has 9 tab-separated columns:
1. seqid       5. end          9. attributes (key=v1,v2;key2=v3)
2. source      6. score
3. type        7. strand
4. start       8. phase

Lines starting with '##' are directives, lines starting with a single '#'
are comments. Reserved characters inside columns are percent-encoded.
"""

import io
import logging
import math
import re
from typing import IO, Dict, Iterable, Iterator, List, Optional, Tuple, Union
from urllib.parse import unquote

from genoio.config import OptionsLike, resolve_options
from genoio.errors import FormatError, IoError, ValidationError
from genoio.io.lines import LineReader
from genoio.io.records import Feature, MetadataEvent, Strand
from genoio.results import END_OF_INPUT, Error, Ok, PullResult

_LOGGER = logging.getLogger(__name__)

GFF_NUM_COLUMNS = 9
MISSING = "."
FASTA_DIRECTIVE = "FASTA"

# Characters with special meaning in GFF3 columns, plus all control characters
RESERVED_CHARACTERS = "\t\n\r;=%&," + "".join(chr(c) for c in range(0x20)) + "\x7f"
_ENCODE_TABLE = {ord(c): f"%{ord(c):02X}" for c in RESERVED_CHARACTERS}
_LEADING_RESERVED = ("#", ">")

_COORDINATE = re.compile(r"[0-9]+")
_PHASES = {"0": 0, "1": 1, "2": 2}

GffItem = Union[Feature, MetadataEvent]


def percent_encode(text: str) -> str:
    """
    Escape GFF3 reserved characters as %HH.

    Example:
        >>> percent_encode("a;b=c")
        'a%3Bb%3Dc'
    """
    return text.translate(_ENCODE_TABLE)


def percent_decode(text: str, line: Optional[int] = None) -> str:
    """
    Reverse percent_encode; any %HH escape is decoded as UTF-8.

    Raises:
        FormatError: If the escapes do not form valid UTF-8
    """
    if "%" not in text:
        return text
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise FormatError(f"invalid percent-encoding in {text!r}", line) from exc


def parse_attributes(field: str, line: Optional[int] = None) -> Dict[str, Tuple[str, ...]]:
    """
    Parse the attributes column into an ordered key -> values mapping.

    Args:
        field: Raw attributes column, e.g. "ID=gene1;Alias=a,b"
        line: Line number used in error messages

    Returns:
        Dictionary mapping decoded keys to tuples of decoded values

    Raises:
        FormatError: On a pair without '=', an empty key or a duplicate key
    """
    attributes: Dict[str, Tuple[str, ...]] = {}
    if field in ("", MISSING):
        return attributes

    for chunk in field.split(";"):
        if not chunk.strip():
            continue
        if "=" not in chunk:
            raise FormatError(f"attribute {chunk!r} is missing '='", line)
        raw_key, raw_value = chunk.split("=", 1)
        key = percent_decode(raw_key, line)
        if not key:
            raise FormatError(f"attribute {chunk!r} has an empty key", line)
        if key in attributes:
            raise FormatError(f"duplicate attribute key {key!r}", line)
        attributes[key] = tuple(percent_decode(v, line) for v in raw_value.split(","))
    return attributes


def format_attributes(attributes) -> str:
    if not attributes:
        return MISSING
    return ";".join(
        f"{percent_encode(key)}={','.join(percent_encode(v) for v in values)}"
        for key, values in attributes.items()
    )


def _parse_name(text: str, column: str, line: int) -> str:
    value = percent_decode(text, line)
    if not value:
        raise ValidationError(f"empty {column} column", line)
    return value


def _parse_coordinate(text: str, column: str, line: int) -> int:
    if not _COORDINATE.fullmatch(text):
        raise ValidationError(f"{column} is not a positive integer: {text!r}", line)
    return int(text)


def _parse_score(text: str, line: int) -> Optional[float]:
    if text == MISSING:
        return None
    try:
        score = float(text)
    except ValueError:
        raise ValidationError(f"score is not a number: {text!r}", line) from None
    if not math.isfinite(score):
        raise ValidationError(f"score must be finite: {text!r}", line)
    return score


def _parse_strand(text: str, line: int) -> Strand:
    try:
        return Strand(text)
    except ValueError:
        raise ValidationError(f"invalid strand {text!r}, expected one of + - . ?", line) from None


def _parse_phase(text: str, line: int) -> Optional[int]:
    if text == MISSING:
        return None
    if text not in _PHASES:
        raise ValidationError(f"invalid phase {text!r}, expected one of 0 1 2 .", line)
    return _PHASES[text]


def parse_feature_line(text: str, line: int = 0) -> Feature:
    """
    Parse one GFF3 feature line (without the line ending).

    Raises:
        FormatError: Wrong column count or malformed attributes
        ValidationError: Invalid coordinates, score, strand or phase
    """
    columns = text.split("\t")
    if len(columns) != GFF_NUM_COLUMNS:
        raise FormatError(f"expected {GFF_NUM_COLUMNS} columns, got {len(columns)}", line)

    seqid, source, ftype, start, end, score, strand, phase, attributes = columns

    seqid = _parse_name(seqid, "seqid", line)
    source = _parse_name(source, "source", line)
    ftype = _parse_name(ftype, "type", line)

    start = _parse_coordinate(start, "start", line)
    end = _parse_coordinate(end, "end", line)
    if start < 1:
        raise ValidationError(f"start must be >= 1, got {start}", line)
    if start > end:
        raise ValidationError(f"start {start} is greater than end {end}", line)

    return Feature(
        seqid=seqid,
        source=source,
        type=ftype,
        start=start,
        end=end,
        score=_parse_score(score, line),
        strand=_parse_strand(strand, line),
        phase=_parse_phase(phase, line),
        attributes=parse_attributes(attributes, line),
    )


def _encode_seqid(seqid: str) -> str:
    # A leading '#' would read back as a comment or directive, '>' as FASTA
    encoded = percent_encode(seqid)
    if encoded[:1] in _LEADING_RESERVED:
        encoded = f"%{ord(encoded[0]):02X}{encoded[1:]}"
    return encoded


def format_feature_line(feature: Feature) -> str:
    """Serialize a Feature as one tab-joined GFF3 line (no line ending)."""
    columns = [
        _encode_seqid(feature.seqid),
        percent_encode(feature.source),
        percent_encode(feature.type),
        str(feature.start),
        str(feature.end),
        MISSING if feature.score is None else repr(float(feature.score)),
        feature.strand.value,
        MISSING if feature.phase is None else str(feature.phase),
        format_attributes(feature.attributes),
    ]
    return "\t".join(columns)


class GffReader:
    """
    Pull-based GFF3 parser.

    Produces Feature and MetadataEvent items in source order. Comments and
    blank lines are skipped. A ``##FASTA`` directive ends the annotation
    section: it is returned as a MetadataEvent and the reader stops, leaving
    the stream at the first line of the embedded FASTA data.

    Args:
        stream: Text or binary stream positioned at the start of GFF3 data
        options: CodecOptions or mapping; accepted for symmetry with FASTA
    """

    def __init__(self, stream: IO, options: OptionsLike = None):
        self.options = resolve_options(options)
        self._lines = LineReader(stream)
        self._finished = False
        self._error: Optional[Exception] = None
        self.directive_count = 0
        self.feature_count = 0

    def __iter__(self) -> Iterator[GffItem]:
        return self

    def __next__(self) -> GffItem:
        item = self._next_item()
        if item is None:
            raise StopIteration
        return item

    def pull(self) -> PullResult:
        """Return Ok(item), END_OF_INPUT or Error without raising."""
        try:
            item = self._next_item()
        except (IoError, FormatError, ValidationError) as exc:
            return Error.from_exception(exc)
        if item is None:
            return END_OF_INPUT
        return Ok(item)

    def features(self) -> Iterator[Feature]:
        """Iterate over the remaining features, skipping directives."""
        for item in self:
            if isinstance(item, Feature):
                yield item

    def _next_item(self) -> Optional[GffItem]:
        if self._error is not None:
            raise self._error
        if self._finished:
            return None
        try:
            for line_number, text in self._lines:
                if text.startswith("##"):
                    if "\r" in text:
                        raise FormatError("directive contains a carriage return", line_number)
                    event = MetadataEvent(text=text[2:], line=line_number)
                    self.directive_count += 1
                    if event.name == FASTA_DIRECTIVE:
                        _LOGGER.debug("Found ##FASTA on line %d, ending annotations", line_number)
                        self._finish()
                    return event
                if text.startswith("#") or not text.strip():
                    continue
                feature = parse_feature_line(text, line_number)
                self.feature_count += 1
                return feature
        except (IoError, FormatError, ValidationError) as exc:
            self._error = exc
            raise

        self._finish()
        return None

    def _finish(self) -> None:
        self._finished = True
        _LOGGER.debug(
            "Finished GFF input: %d features, %d directives",
            self.feature_count, self.directive_count
        )


def open_gff(stream: IO, options: OptionsLike = None) -> GffReader:
    """
    Read features and directives from a GFF3 stream.

    Args:
        stream: Text or binary stream; opening and closing it is up to the caller
        options: Codec options

    Returns:
        GffReader yielding Feature and MetadataEvent objects lazily

    Example:
        >>> with open("genes.gff3") as handle:
        ...     genes = [f for f in open_gff(handle).features() if f.type == "gene"]
    """
    return GffReader(stream, options)


def parse_gff_string(content: str, options: OptionsLike = None) -> List[GffItem]:
    """Parse GFF3 format from a string."""
    return list(GffReader(io.StringIO(content), options))


class GffWriter:
    """
    Write Feature and MetadataEvent objects as GFF3 lines.

    Args:
        stream: Text or binary output stream
        options: Codec options (no writer-specific settings)
    """

    def __init__(self, stream: IO, options: OptionsLike = None):
        self.options = resolve_options(options)
        self._stream = stream
        self._binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
        self.items_written = 0

    def write(self, item: GffItem) -> None:
        if isinstance(item, Feature):
            text = format_feature_line(item)
        elif isinstance(item, MetadataEvent):
            text = str(item)
        else:
            raise TypeError(f"Cannot write {type(item).__name__} as GFF")
        text += "\n"
        try:
            self._stream.write(text.encode("utf-8") if self._binary else text)
        except OSError as exc:
            raise IoError(f"Failed to write GFF line: {exc}") from exc
        self.items_written += 1

    def write_items(self, items: Iterable[GffItem]) -> int:
        for item in items:
            self.write(item)
        return self.items_written


def write_gff(
    stream: IO,
    items: Union[GffItem, Iterable[GffItem]],
    options: OptionsLike = None
) -> int:
    """
    Write features (and optional directives) to a GFF3 stream.

    Args:
        stream: Output stream; the caller owns it
        items: Feature/MetadataEvent objects in output order

    Returns:
        Number of lines written

    Example:
        >>> header = MetadataEvent("gff-version 3")
        >>> gene = Feature("chr1", ".", "gene", 1, 100, strand="+",
        ...                attributes={"ID": ["gene1"]})
        >>> write_gff(sys.stdout, [header, gene])
        ##gff-version 3
        chr1	.	gene	1	100	.	+	.	ID=gene1
        2
    """
    if isinstance(items, (Feature, MetadataEvent)):
        items = [items]
    written = GffWriter(stream, options).write_items(items)
    _LOGGER.debug("Wrote %d GFF lines", written)
    return written
