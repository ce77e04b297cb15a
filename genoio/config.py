"""Codec configuration."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional, Union


class Alphabet(str, Enum):
    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "Protein"

    @classmethod
    def parse(cls, value: Union[str, "Alphabet"]) -> "Alphabet":
        """Look up an alphabet by value or name, ignoring case."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if value.lower() in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown alphabet: {value}")


DEFAULT_LINE_WIDTH = 70


@dataclass(frozen=True)
class CodecOptions:
    """
    Options shared by the FASTA and GFF codecs.

    Attributes:
        alphabet: Symbol set sequences are checked against (FASTA reader)
        strict: Reject characters outside the alphabet; if False they are
            passed through unchanged
        line_width: Sequence characters per line (FASTA writer)
        uppercase: Fold sequences to upper case while parsing
    """
    alphabet: Alphabet = Alphabet.DNA
    strict: bool = True
    line_width: int = DEFAULT_LINE_WIDTH
    uppercase: bool = False

    def __post_init__(self):
        object.__setattr__(self, "alphabet", Alphabet.parse(self.alphabet))
        if not isinstance(self.line_width, int) or isinstance(self.line_width, bool):
            raise ValueError(f"line_width must be an integer, got {self.line_width!r}")
        if self.line_width <= 0:
            raise ValueError(f"line_width must be positive, got {self.line_width}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "CodecOptions":
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown codec options: {', '.join(sorted(unknown))}")
        return cls(**values)

    def as_dict(self) -> dict:
        return {
            "alphabet": self.alphabet.value,
            "strict": self.strict,
            "line_width": self.line_width,
            "uppercase": self.uppercase,
        }


OptionsLike = Optional[Union[CodecOptions, Mapping[str, Any]]]


def resolve_options(options: OptionsLike = None) -> CodecOptions:
    """Accept None, a CodecOptions or a plain mapping."""
    if options is None:
        return CodecOptions()
    if isinstance(options, CodecOptions):
        return options
    return CodecOptions.from_mapping(options)
