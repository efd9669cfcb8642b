"""
Tabular output for parsed TRF records.
"""

from pathlib import Path
from typing import IO, Iterable, Union
import pandas as pd
import logging

from ..core.record import RECORD_FIELDS, Record

logger = logging.getLogger(__name__)

COLUMNS = ['seq_id', *RECORD_FIELDS]


def records_to_dataframe(records: Iterable[Record]) -> pd.DataFrame:
    """Collect records into a DataFrame, one row per repeat, in input order."""
    return pd.DataFrame([r.to_dict() for r in records], columns=COLUMNS)


def write_records_tsv(records: Iterable[Record], output: Union[str, Path, IO]) -> int:
    """
    Write records to a TSV file.

    Args:
        records: Records to write (consumed lazily into a table)
        output: Path or open text handle

    Returns:
        Number of records written
    """
    df = records_to_dataframe(records)
    df.to_csv(output, sep='\t', index=False)
    logger.info(f"Wrote {len(df)} records to {output}")
    return len(df)


def summarize_by_sequence(df: pd.DataFrame) -> pd.DataFrame:
    """Per-sequence repeat counts and covered span, in first-seen order."""
    if df.empty:
        return pd.DataFrame(columns=['seq_id', 'n_repeats', 'repeat_bp'])

    spans = df['end'] - df['start'] + 1
    summary = (
        df.assign(repeat_bp=spans)
        .groupby('seq_id', sort=False)
        .agg(n_repeats=('start', 'size'), repeat_bp=('repeat_bp', 'sum'))
        .reset_index()
    )
    return summary
