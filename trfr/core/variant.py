"""
TRF output dialects.

TRF writes its data table in two layouts depending on how it was invoked:
the classic ``-d`` data file and the ``-ngs`` stream format.
"""

from enum import Enum
from typing import Tuple

# Header lines written by TRF in -d mode
CLASSIC_NOISE_PREFIXES = (
    "Tandem Repeats",
    "Gary Benson",
    "Program",
    "Boston",
    "Version",
    "Parameters",
)

# Number of positional fields every data line decodes into
DATA_FIELD_COUNT = 15


class FormatVariant(Enum):
    """Supported TRF output dialects."""
    CLASSIC = "d"
    NGS = "ngs"

    @classmethod
    def from_flag(cls, value) -> 'FormatVariant':
        """Resolve a variant from a TRF flag ('-d', '-ngs') or name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().lstrip('-')
        if key in ('d', 'classic'):
            return cls.CLASSIC
        if key == 'ngs':
            return cls.NGS
        raise ValueError(f"Unknown TRF format variant: {value!r} (expected 'd' or 'ngs')")

    @property
    def flag(self) -> str:
        """The TRF command-line flag producing this dialect."""
        return f"-{self.value}"

    @property
    def noise_prefixes(self) -> Tuple[str, ...]:
        """Line prefixes that mark header boilerplate."""
        if self is FormatVariant.CLASSIC:
            return CLASSIC_NOISE_PREFIXES
        return ()

    @property
    def identifier_marker(self) -> str:
        """Prefix that announces a new sequence identifier."""
        return "Sequence" if self is FormatVariant.CLASSIC else "@"

    @property
    def identifier_prefix(self) -> str:
        """Literal prefix removed from an identifier line to get the label."""
        return "Sequence: " if self is FormatVariant.CLASSIC else "@"

    @property
    def trailing_columns(self) -> int:
        """Flanking-region columns appended to every data line."""
        return 2 if self is FormatVariant.NGS else 0

    @property
    def expected_tokens(self) -> int:
        """Token count of a well-formed data line before truncation."""
        return DATA_FIELD_COUNT + self.trailing_columns
