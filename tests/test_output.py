"""Tests for trfr.io module."""

import io

import pandas as pd
import pytest
from trfr.core.record import Record
from trfr.io.output import (
    COLUMNS,
    records_to_dataframe,
    summarize_by_sequence,
    write_records_tsv,
)
from trfr.reader import Reader


TRF_TEXT = (
    "Sequence: chr1\n"
    "10 20 5 2.0 5 90 1 50 20 20 30 30 1.5 ACGTA ACGTAACGTA\n"
    "100 131 16 2.0 16 100 0 64 25 25 25 25 2.0 ACGTACGTACGTACGT ACGTACGTACGTACGTACGTACGTACGTACGT\n"
    "Sequence: chr2\n"
    "5 30 2 13.0 2 96 0 50 50 0 0 50 1.0 AT ATATATATATATATATATATATATAT\n"
)


def parsed_records():
    return list(Reader.from_reader(io.StringIO(TRF_TEXT)).records())


class TestRecordsToDataframe:
    """Test DataFrame conversion."""

    def test_columns_and_rows(self):
        """Test one row per record with the standard columns."""
        df = records_to_dataframe(parsed_records())

        assert list(df.columns) == COLUMNS
        assert len(df) == 3
        assert df['seq_id'].tolist() == ['chr1', 'chr1', 'chr2']
        assert df['start'].tolist() == [10, 100, 5]

    def test_empty(self):
        """Test no records gives an empty frame with all columns."""
        df = records_to_dataframe([])
        assert df.empty
        assert list(df.columns) == COLUMNS


class TestWriteRecordsTsv:
    """Test TSV writing."""

    def test_write_to_path(self, tmp_path):
        """Test writing and reading back a TSV."""
        out = tmp_path / "repeats.tsv"
        n = write_records_tsv(parsed_records(), out)

        assert n == 3
        df = pd.read_csv(out, sep='\t')
        assert list(df.columns) == COLUMNS
        assert df.loc[2, 'consensus_pattern'] == 'AT'

    def test_write_to_handle(self):
        """Test writing to an open text handle."""
        buf = io.StringIO()
        write_records_tsv([Record(seq_id="s", start=1, end=4)], buf)

        header, row = buf.getvalue().splitlines()
        assert header.split('\t')[:3] == ['seq_id', 'start', 'end']
        assert row.split('\t')[:3] == ['s', '1', '4']


class TestSummarizeBySequence:
    """Test per-sequence summary."""

    def test_counts_and_span(self):
        """Test repeat counts and bp per sequence."""
        summary = summarize_by_sequence(records_to_dataframe(parsed_records()))

        assert summary['seq_id'].tolist() == ['chr1', 'chr2']
        assert summary['n_repeats'].tolist() == [2, 1]
        assert summary['repeat_bp'].tolist() == [11 + 32, 26]

    def test_empty(self):
        """Test an empty frame gives an empty summary."""
        summary = summarize_by_sequence(records_to_dataframe([]))
        assert summary.empty


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
