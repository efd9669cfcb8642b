"""
Error types raised while reading TRF output.

Every failure is a TrfError subclass tagged with an ErrorKind, so callers can
either catch the specific class or branch on ``err.kind``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """The specific kind of a TrfError."""
    IO = "io"
    INT = "int"
    FLOAT = "float"
    PARSER = "parser"
    READ_RECORD = "read_record"


class TrfError(Exception):
    """Base class for errors raised when parsing TRF text."""
    kind: ErrorKind
    prefix = "error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix} - {detail}")


class TrfIOError(TrfError):
    """The underlying source could not be opened or read."""
    kind = ErrorKind.IO
    prefix = "I/O error"

    def __init__(self, original: Exception):
        self.original = original
        super().__init__(str(original))


class FieldParseError(TrfError, ValueError):
    """A positional field could not be converted to its numeric type."""

    def __init__(self, detail: str, field: Optional[str] = None, token: Optional[str] = None):
        self.field = field
        self.token = token
        if field is not None:
            detail = f"{detail} (field '{field}', value {token!r})"
        super().__init__(detail)


class IntParseError(FieldParseError):
    """An integer field failed to parse."""
    kind = ErrorKind.INT
    prefix = "parsing integer error"


class FloatParseError(FieldParseError):
    """A float field failed to parse."""
    kind = ErrorKind.FLOAT
    prefix = "parsing float error"


class ParserError(TrfError):
    """A data line did not have the expected structure."""
    kind = ErrorKind.PARSER
    prefix = "parser error"


class ReadRecordError(TrfError):
    """Wraps any failure raised while reading a record, with its line number."""
    kind = ErrorKind.READ_RECORD
    prefix = "reading record"

    def __init__(self, line: int, cause: TrfError):
        self.line = line
        self.cause = cause
        super().__init__(f"at line {line}, {cause}")
