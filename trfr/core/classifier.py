"""
Line classification for TRF output.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .variant import FormatVariant


class LineKind(Enum):
    """What a single line of TRF output represents."""
    BLANK = "blank"
    BOILERPLATE = "boilerplate"
    IDENTIFIER = "identifier"
    DATA = "data"


@dataclass
class ClassifiedLine:
    """A raw line labelled with its kind.

    ``seq_id`` is only set for identifier lines.
    """
    kind: LineKind
    text: str
    seq_id: Optional[str] = None

    @property
    def is_skippable(self) -> bool:
        return self.kind in (LineKind.BLANK, LineKind.BOILERPLATE)


def extract_identifier(line: str, variant: FormatVariant) -> str:
    """Return the sequence label announced by an identifier line.

    Only an exact leading prefix ('Sequence: ' or '@') is removed, so a
    label that itself contains the prefix text is kept intact.
    """
    prefix = variant.identifier_prefix
    label = line[len(prefix):] if line.startswith(prefix) else line
    return label.strip()


def classify_line(line: str, variant: FormatVariant) -> ClassifiedLine:
    """
    Classify one raw line (terminator included) of TRF output.

    Args:
        line: The line as read from the source
        variant: Active output dialect

    Returns:
        ClassifiedLine; identifier lines carry the extracted seq_id
    """
    if not line.strip():
        return ClassifiedLine(LineKind.BLANK, line)

    if any(line.startswith(prefix) for prefix in variant.noise_prefixes):
        return ClassifiedLine(LineKind.BOILERPLATE, line)

    if line.startswith(variant.identifier_marker):
        return ClassifiedLine(
            LineKind.IDENTIFIER,
            line,
            seq_id=extract_identifier(line, variant),
        )

    return ClassifiedLine(LineKind.DATA, line)
