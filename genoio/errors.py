"""
Exceptions raised by the FASTA and GFF codecs.

Stream failures surface as IoError (an OSError). Problems with the text
itself derive from CodecError (a ValueError) and always carry the 1-based
line number where they were detected.
"""

from typing import Optional


class IoError(OSError):
    """The underlying stream failed to read or write."""


class CodecError(ValueError):
    """
    Base class for problems found in FASTA/GFF text.

    Attributes:
        line: 1-based line number of the offending line (None if unknown)
        message: Human readable description without the line prefix
    """

    kind = "codec"

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class FormatError(CodecError):
    """Structural violation of the grammar (missing header, column count...)."""

    kind = "format"


class ValidationError(CodecError):
    """A well-formed field holds a value that is not allowed."""

    kind = "validation"

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        character: Optional[str] = None
    ):
        self.character = character
        super().__init__(message, line)
