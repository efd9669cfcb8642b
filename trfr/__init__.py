"""
trfr - reader for Tandem Repeats Finder output.
"""

__version__ = "0.1.0"

from .config import ReaderConfig
from .core.record import Record
from .core.variant import FormatVariant
from .errors import (
    ErrorKind,
    FieldParseError,
    FloatParseError,
    IntParseError,
    ParserError,
    ReadRecordError,
    TrfError,
    TrfIOError,
)
from .reader import Reader, RecordsIntoIter, RecordsIter

__all__ = [
    "Reader",
    "RecordsIter",
    "RecordsIntoIter",
    "Record",
    "FormatVariant",
    "ReaderConfig",
    "ErrorKind",
    "TrfError",
    "TrfIOError",
    "FieldParseError",
    "IntParseError",
    "FloatParseError",
    "ParserError",
    "ReadRecordError",
    "__version__",
]
