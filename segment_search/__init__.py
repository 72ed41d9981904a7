"""Decode scrambled seven-segment displays by structural digit deduction."""

from .errors import (
    SegmentSearchError,
    TokenizeError,
    MalformedTrainingSetError,
    UnknownPatternError,
    ReadoutLengthError,
)
from .glyphs import DIGIT_GLYPHS, SEGMENT_NAMES, UNIQUE_DIGITS, count_segments
from .tokenizer import DisplayRecord, parse_pattern, parse_record, format_pattern
from .deduction import DigitMapping, deduce
from .decoder import ReadoutResult, decode, count_unique_segments
from .aggregate import Totals, decode_record, decode_lines, decode_file
from .verify import solve_wiring, verify_mapping

__all__ = [
    "SegmentSearchError",
    "TokenizeError",
    "MalformedTrainingSetError",
    "UnknownPatternError",
    "ReadoutLengthError",
    "DIGIT_GLYPHS",
    "SEGMENT_NAMES",
    "UNIQUE_DIGITS",
    "count_segments",
    "DisplayRecord",
    "parse_pattern",
    "parse_record",
    "format_pattern",
    "DigitMapping",
    "deduce",
    "ReadoutResult",
    "decode",
    "count_unique_segments",
    "Totals",
    "decode_record",
    "decode_lines",
    "decode_file",
    "solve_wiring",
    "verify_mapping",
]
__version__ = "0.1.0"
