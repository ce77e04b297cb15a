"""
Tagged results returned by the readers' ``pull()`` method.

A pull yields exactly one of:
- Ok(value): the next record or metadata event
- END_OF_INPUT: the stream is exhausted
- Error(kind, line, message, exception): parsing stopped
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from genoio.errors import CodecError, IoError


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class EndOfInput:

    @property
    def is_ok(self) -> bool:
        return False


END_OF_INPUT = EndOfInput()


@dataclass(frozen=True)
class Error:
    """
    A failed pull.

    Attributes:
        kind: "io", "format" or "validation"
        line: Line number where the problem was found (None for I/O failures)
        message: Description without the line prefix
        exception: The exception that iteration would have raised
    """
    kind: str
    line: Optional[int]
    message: str
    exception: Exception = field(compare=False, repr=False)

    @property
    def is_ok(self) -> bool:
        return False

    def raise_error(self) -> None:
        raise self.exception

    @classmethod
    def from_exception(cls, exc: Exception) -> "Error":
        if isinstance(exc, IoError):
            return cls(kind="io", line=None, message=str(exc), exception=exc)
        if isinstance(exc, CodecError):
            return cls(kind=exc.kind, line=exc.line, message=exc.message, exception=exc)
        raise TypeError(f"Cannot convert {type(exc).__name__} to a pull result")


PullResult = Union[Ok, EndOfInput, Error]
