"""
Core parsing modules for trfr.
"""

from .classifier import (
    ClassifiedLine,
    LineKind,
    classify_line,
    extract_identifier,
)
from .decoder import (
    decode_fields,
    decode_line,
    parse_float,
    parse_unsigned,
    split_fields,
)
from .record import (
    RECORD_FIELDS,
    Record,
)
from .variant import (
    DATA_FIELD_COUNT,
    FormatVariant,
)

__all__ = [
    # Record
    'Record',
    'RECORD_FIELDS',
    # Variant
    'FormatVariant',
    'DATA_FIELD_COUNT',
    # Classification
    'LineKind',
    'ClassifiedLine',
    'classify_line',
    'extract_identifier',
    # Decoding
    'parse_unsigned',
    'parse_float',
    'split_fields',
    'decode_fields',
    'decode_line',
]
