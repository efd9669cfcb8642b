"""
Record model for Tandem Repeats Finder output.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

# Positional order of the fields on a TRF data line
RECORD_FIELDS = (
    'start',
    'end',
    'period',
    'copy_number',
    'consensus_pattern_size',
    'perc_matches',
    'perc_indels',
    'alignment_score',
    'perc_a',
    'perc_c',
    'perc_g',
    'perc_t',
    'entropy',
    'consensus_pattern',
    'repeat_seq',
)


@dataclass
class Record:
    """
    One tandem repeat reported by TRF.

    Attributes:
        seq_id: Name of the FASTA record the repeat was found in
        start: Start index of the repeat
        end: End index of the repeat
        period: Period size of the repeat
        copy_number: Number of copies aligned with the consensus pattern
        consensus_pattern_size: Size of consensus pattern (may differ slightly from the period)
        perc_matches: Percent of matches between adjacent copies overall
        perc_indels: Percent of indels between adjacent copies overall
        alignment_score: Alignment score
        perc_a, perc_c, perc_g, perc_t: Nucleotide composition percentages
        entropy: Entropy measure based on percent composition
        consensus_pattern: The repeat pattern itself
        repeat_seq: The longer repeat sequence extracted from the input
    """
    seq_id: str = ""
    start: int = 0
    end: int = 0
    period: int = 0
    copy_number: float = 0.0
    consensus_pattern_size: int = 0
    perc_matches: int = 0
    perc_indels: int = 0
    alignment_score: int = 0
    perc_a: int = 0
    perc_c: int = 0
    perc_g: int = 0
    perc_t: int = 0
    entropy: float = 0.0
    consensus_pattern: str = ""
    repeat_seq: str = ""

    @property
    def length(self) -> int:
        """Span of the repeat in the sequence (inclusive coordinates)."""
        return self.end - self.start + 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for output."""
        return asdict(self)
