"""
Positional field decoding for TRF data lines.

A data line is split on single spaces and its tokens are mapped, in order,
onto the typed fields of a Record. Numeric tokens are checked against the
bit width of their column.
"""

import re
from typing import Callable, List, Optional, Sequence

from ..errors import FloatParseError, IntParseError, ParserError
from .record import RECORD_FIELDS, Record
from .variant import DATA_FIELD_COUNT, FormatVariant

UNSIGNED_PATTERN = re.compile(r'\+?[0-9]+')
FLOAT_PATTERN = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
    re.IGNORECASE,
)


def parse_unsigned(token: str, bits: int, field: Optional[str] = None) -> int:
    """Parse an unsigned decimal integer that must fit in ``bits`` bits."""
    if not token:
        raise IntParseError("cannot parse integer from empty string", field, token)
    if not UNSIGNED_PATTERN.fullmatch(token):
        raise IntParseError("invalid digit found in string", field, token)
    value = int(token)
    if value >= 1 << bits:
        raise IntParseError("number too large to fit in target type", field, token)
    return value


def parse_float(token: str, field: Optional[str] = None) -> float:
    """Parse a decimal floating point value (no surrounding whitespace)."""
    if not token:
        raise FloatParseError("cannot parse float from empty string", field, token)
    if not FLOAT_PATTERN.fullmatch(token):
        raise FloatParseError("invalid float literal", field, token)
    return float(token)


def _unsigned(bits: int) -> Callable[[str, str], int]:
    return lambda token, field: parse_unsigned(token, bits, field)


def _text(token: str, field: str) -> str:
    return token


def _trailing_text(token: str, field: str) -> str:
    # Last column keeps the line terminator
    return token.rstrip()


FIELD_PARSERS = {
    'start': _unsigned(64),
    'end': _unsigned(64),
    'period': _unsigned(16),
    'copy_number': parse_float,
    'consensus_pattern_size': _unsigned(16),
    'perc_matches': _unsigned(8),
    'perc_indels': _unsigned(8),
    'alignment_score': _unsigned(32),
    'perc_a': _unsigned(8),
    'perc_c': _unsigned(8),
    'perc_g': _unsigned(8),
    'perc_t': _unsigned(8),
    'entropy': parse_float,
    'consensus_pattern': _text,
    'repeat_seq': _trailing_text,
}


def split_fields(line: str, variant: FormatVariant) -> List[str]:
    """
    Split a data line into exactly 15 positional tokens.

    NGS lines lose their two trailing flanking-region columns first.

    Raises:
        ParserError: If the token count is wrong for the variant
    """
    tokens = line.split(' ')

    if variant.trailing_columns:
        if len(tokens) != variant.expected_tokens:
            raise ParserError(
                f"expected {variant.expected_tokens} columns including "
                f"{variant.trailing_columns} flanking columns, found {len(tokens)}"
            )
        tokens = tokens[:-variant.trailing_columns]

    if len(tokens) != DATA_FIELD_COUNT:
        raise ParserError(f"could not split into {DATA_FIELD_COUNT} elements")

    return tokens


def decode_fields(tokens: Sequence[str]) -> Record:
    """Build a Record from 15 positional tokens.

    The record is only constructed once every token has converted, so a
    failure never leaves a partially filled record behind.
    """
    values = {
        name: FIELD_PARSERS[name](token, name)
        for name, token in zip(RECORD_FIELDS, tokens)
    }
    return Record(**values)


def decode_line(line: str, variant: FormatVariant) -> Record:
    """Decode one data line into a Record (seq_id left empty)."""
    return decode_fields(split_fields(line, variant))
