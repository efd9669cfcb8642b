"""
I/O modules for trfr.
"""

from .output import (
    COLUMNS,
    records_to_dataframe,
    summarize_by_sequence,
    write_records_tsv,
)

__all__ = [
    'COLUMNS',
    'records_to_dataframe',
    'write_records_tsv',
    'summarize_by_sequence',
]
