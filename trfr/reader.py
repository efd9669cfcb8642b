"""
Streaming reader for Tandem Repeats Finder output.

The reader pulls one line at a time from its source, classifies it, keeps
track of the most recently announced sequence identifier and emits a Record
for every data line.
"""

import gzip
import logging
from pathlib import Path
from typing import IO, Optional, Union

from .core.classifier import LineKind, classify_line
from .core.decoder import decode_line
from .core.record import Record
from .core.variant import FormatVariant
from .errors import ReadRecordError, TrfError, TrfIOError

logger = logging.getLogger(__name__)


def open_trf_output(path: Path) -> IO[str]:
    """Open a TRF output file for reading, transparently handling gzip."""
    if str(path).endswith('.gz'):
        return gzip.open(path, 'rt', encoding='utf-8')
    return open(path, 'r', encoding='utf-8')


class Reader:
    """
    Reads Records from TRF output in a single dialect.

    Attributes:
        variant: Output dialect, fixed for the lifetime of the reader
        line_number: 1-based number of the line read last
        seq_id: Sequence identifier announced most recently
    """

    def __init__(
        self,
        source: IO,
        variant: Union[FormatVariant, str] = FormatVariant.CLASSIC,
        owns_source: bool = False,
    ):
        self._source = source
        self._owns_source = owns_source
        self.variant = FormatVariant.from_flag(variant)
        self.line_number = 0
        self.seq_id = ""
        self.records_read = 0
        self._exhausted = False

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        variant: Union[FormatVariant, str] = FormatVariant.CLASSIC,
    ) -> 'Reader':
        """Open a TRF output file.

        Raises:
            TrfIOError: If the file cannot be opened
        """
        variant = FormatVariant.from_flag(variant)
        try:
            source = open_trf_output(Path(path))
        except OSError as e:
            raise TrfIOError(e) from e
        logger.info(f"Reading TRF {variant.flag} output from {path}")
        return cls(source, variant, owns_source=True)

    @classmethod
    def from_reader(
        cls,
        source: IO,
        variant: Union[FormatVariant, str] = FormatVariant.CLASSIC,
    ) -> 'Reader':
        """Wrap an already open text or binary source."""
        return cls(source, variant)

    def __enter__(self) -> 'Reader':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __iter__(self) -> 'RecordsIter':
        return self.records()

    def close(self):
        """Close the underlying source if this reader opened it."""
        if self._owns_source and not self._source.closed:
            self._source.close()

    def records(self) -> 'RecordsIter':
        """Iterate over the remaining records.

        Each call resumes from the reader's current position.
        """
        return RecordsIter(self)

    def into_records(self) -> 'RecordsIntoIter':
        """Hand the reader over to an iterator that closes it when exhausted."""
        return RecordsIntoIter(self)

    def _read_line(self) -> str:
        try:
            line = self._source.readline()
            if isinstance(line, bytes):
                line = line.decode('utf-8')
        except (OSError, UnicodeDecodeError) as e:
            self._exhausted = True
            raise TrfIOError(e) from e
        return line

    def read_record(self) -> Optional[Record]:
        """
        Read the next record.

        Returns:
            The next Record, or None once the source is exhausted

        Raises:
            TrfIOError: If reading from the source fails
            ReadRecordError: If a data line cannot be decoded
        """
        if self._exhausted:
            return None

        record = None
        while record is None:
            self.line_number += 1
            line = self._read_line()

            if not line:
                self._exhausted = True
                logger.debug(f"End of TRF output after {self.records_read} records")
                return None

            classified = classify_line(line, self.variant)

            if classified.is_skippable:
                continue

            if classified.kind is LineKind.IDENTIFIER:
                self.seq_id = classified.seq_id
                logger.debug(f"Line {self.line_number}: sequence {self.seq_id}")
                continue

            try:
                record = decode_line(line, self.variant)
            except TrfError as e:
                self._exhausted = True
                raise ReadRecordError(self.line_number, e) from e

        record.seq_id = self.seq_id
        self.records_read += 1
        return record


class RecordsIntoIter:
    """An owning iterator over the records of a Reader."""

    def __init__(self, reader: Reader):
        self._reader = reader

    @property
    def reader(self) -> Reader:
        """The underlying reader."""
        return self._reader

    def into_reader(self) -> Reader:
        """Give the underlying reader back, ending this iterator's ownership."""
        reader, self._reader = self._reader, None
        return reader

    def __iter__(self) -> 'RecordsIntoIter':
        return self

    def __next__(self) -> Record:
        if self._reader is None:
            raise StopIteration
        try:
            record = self._reader.read_record()
        except TrfError:
            self._reader.close()
            raise
        if record is None:
            self._reader.close()
            raise StopIteration
        return record


class RecordsIter:
    """A borrowing iterator over the records of a Reader.

    The reader stays usable (and open) after the iterator is exhausted.
    """

    def __init__(self, reader: Reader):
        self._reader = reader

    @property
    def reader(self) -> Reader:
        """The underlying reader."""
        return self._reader

    def __iter__(self) -> 'RecordsIter':
        return self

    def __next__(self) -> Record:
        record = self._reader.read_record()
        if record is None:
            raise StopIteration
        return record
