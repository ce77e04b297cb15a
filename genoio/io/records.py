"""
Record model shared by the codecs.

SequenceRecord holds one FASTA entry, Feature one GFF3 feature line and
MetadataEvent one ``##`` directive. All three are immutable value types.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from genoio.config import DEFAULT_LINE_WIDTH
from genoio.sequence.encoding import encode_symbols


@dataclass(frozen=True)
class SequenceRecord:
    """
    Represents a single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Rest of the header line, may be empty
        sequence: The nucleotide/protein sequence
    """
    id: str
    description: str = ""
    sequence: str = ""

    def __post_init__(self):
        if not self.id or any(c.isspace() for c in self.id):
            raise ValueError(f"Sequence id must be non-empty without whitespace: {self.id!r}")
        object.__setattr__(self, "description", self.description.strip())
        if "\n" in self.description or "\r" in self.description:
            raise ValueError("Description must not contain line breaks")
        if any(c.isspace() for c in self.sequence):
            raise ValueError(f"Sequence {self.id} contains whitespace")
        if ">" in self.sequence:
            raise ValueError(f"Sequence {self.id} contains '>'")

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def header(self) -> str:
        if self.description:
            return f"{self.id} {self.description}"
        return self.id

    def symbols(self) -> np.ndarray:
        """Integer symbol codes of the sequence (see genoio.sequence.encoding)."""
        return encode_symbols(self.sequence)

    def to_fasta(self, line_width: int = DEFAULT_LINE_WIDTH) -> str:
        """Format as FASTA string with wrapped sequence lines."""
        if line_width <= 0:
            raise ValueError(f"line_width must be positive, got {line_width}")
        lines = [f">{self.header}"]
        for i in range(0, len(self.sequence), line_width):
            lines.append(self.sequence[i:i + line_width])
        return "\n".join(lines)


class Strand(str, Enum):
    PLUS = "+"
    MINUS = "-"
    UNKNOWN = "."
    UNSTRANDED = "?"

    def __str__(self) -> str:
        return self.value


VALID_PHASES = (0, 1, 2)

class AttributeMap(Mapping):
    """Read-only, insertion-ordered mapping of attribute key to value tuple."""

    __slots__ = ("_data",)

    def __init__(self, data: Dict[str, Tuple[str, ...]]):
        self._data = data

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AttributeMap({self._data!r})"


def _freeze_attributes(attributes: Mapping) -> AttributeMap:
    frozen = {}
    for key, values in attributes.items():
        if not isinstance(key, str) or not key:
            raise ValueError(f"Attribute keys must be non-empty strings, got {key!r}")
        if isinstance(values, str):
            values = (values,)
        values = tuple(values)
        if not values:
            raise ValueError(f"Attribute {key} has no values")
        if not all(isinstance(v, str) for v in values):
            raise ValueError(f"Attribute {key} values must be strings")
        frozen[key] = values
    return AttributeMap(frozen)


@dataclass(frozen=True)
class Feature:
    """
    Represents a single GFF3 feature line.

    Attributes:
        seqid: Landmark (sequence id) the coordinates refer to
        source: Program or database that produced the feature
        type: Feature type, e.g. "gene", "exon", "CDS"
        start: 1-based inclusive start coordinate
        end: 1-based inclusive end coordinate
        score: Optional score, None when absent
        strand: Strand of the feature
        phase: Reading frame offset (0, 1, 2) or None
        attributes: Ordered mapping of key to a tuple of values
    """
    seqid: str
    source: str
    type: str
    start: int
    end: int
    score: Optional[float] = None
    strand: Strand = Strand.UNKNOWN
    phase: Optional[int] = None
    attributes: Mapping = field(default_factory=dict, hash=False)

    def __post_init__(self):
        for name in ("seqid", "source", "type"):
            if not getattr(self, name):
                raise ValueError(f"Feature {name} must not be empty")
        if self.start < 1:
            raise ValueError(f"Feature start must be >= 1, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"Feature start {self.start} is greater than end {self.end}")
        if self.score is not None and not math.isfinite(self.score):
            raise ValueError(f"Feature score must be finite, got {self.score}")
        if self.phase is not None and self.phase not in VALID_PHASES:
            raise ValueError(f"Feature phase must be one of 0, 1, 2, got {self.phase}")
        strand = Strand.UNKNOWN if self.strand is None else Strand(self.strand)
        object.__setattr__(self, "strand", strand)
        object.__setattr__(self, "attributes", _freeze_attributes(self.attributes))

    def __len__(self) -> int:
        return self.end - self.start + 1

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """First value of an attribute, or default."""
        values = self.attributes.get(key)
        return values[0] if values else default

    @property
    def id(self) -> Optional[str]:
        return self.get("ID")


@dataclass(frozen=True)
class MetadataEvent:
    """
    A ``##`` directive line such as ``##gff-version 3``.

    Attributes:
        text: Everything after the leading ``##``, kept verbatim
        line: Line number in the source (None if built by hand)
    """
    text: str
    line: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if "\n" in self.text or "\r" in self.text:
            raise ValueError("Directive text must not contain line breaks")

    @property
    def name(self) -> str:
        parts = self.text.split(None, 1)
        return parts[0] if parts else ""

    @property
    def value(self) -> str:
        parts = self.text.split(None, 1)
        return parts[1].strip() if len(parts) > 1 else ""

    def __str__(self) -> str:
        return f"##{self.text}"
