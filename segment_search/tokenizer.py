"""
Tokenizer for display records.

A record is one line of text:

    acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf

Ten training patterns, a '|' delimiter, then the four readout patterns.
Each pattern is a set of segment letters 'a'..'g' in any order.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import TokenizeError
from .glyphs import SEGMENT_NAMES, segment_bit, segments_from_mask

NUM_TRAINING = 10
NUM_READOUT = 4
DELIMITER = "|"


@dataclass(frozen=True)
class DisplayRecord:
    """One display: its 10 training masks and the ordered 4-digit readout."""

    training: frozenset[int]
    readout: tuple[int, ...]
    line_number: Optional[int] = None


def parse_pattern(token: str) -> int:
    """
    Convert one pattern token to a segment mask.

    Args:
        token: Segment letters, case-insensitive, each at most once

    Returns:
        Mask with 2-7 bits set

    Raises:
        TokenizeError: On letters outside 'a'..'g', repeats, or bad length
    """
    mask = 0
    for char in token.lower():
        if char not in SEGMENT_NAMES:
            raise TokenizeError(f"invalid segment {char!r} in pattern {token!r}")
        bit = segment_bit(char)
        if mask & bit:
            raise TokenizeError(f"segment {char!r} repeated in pattern {token!r}")
        mask |= bit

    if not 2 <= len(token) <= 7:
        raise TokenizeError(
            f"pattern {token!r} has {len(token)} segments, expected 2-7"
        )
    return mask


def format_pattern(mask: int) -> str:
    """Render a mask as its segment letters."""
    return segments_from_mask(mask)


def parse_record(line: str, line_number: Optional[int] = None) -> DisplayRecord:
    """
    Parse a record line into a DisplayRecord.

    Raises:
        TokenizeError: If the line is not 10 distinct patterns, '|', 4 patterns
    """
    tokens = line.split()
    if tokens.count(DELIMITER) != 1:
        raise TokenizeError(
            f"expected exactly one {DELIMITER!r} delimiter, "
            f"found {tokens.count(DELIMITER)}",
            line_number,
        )

    split = tokens.index(DELIMITER)
    training_tokens = tokens[:split]
    readout_tokens = tokens[split + 1:]

    if len(training_tokens) != NUM_TRAINING:
        raise TokenizeError(
            f"expected {NUM_TRAINING} training patterns, found {len(training_tokens)}",
            line_number,
        )
    if len(readout_tokens) != NUM_READOUT:
        raise TokenizeError(
            f"expected {NUM_READOUT} readout patterns, found {len(readout_tokens)}",
            line_number,
        )

    try:
        training = [parse_pattern(t) for t in training_tokens]
        readout = tuple(parse_pattern(t) for t in readout_tokens)
    except TokenizeError as e:
        e.line_number = line_number
        raise

    unique = frozenset(training)
    if len(unique) != NUM_TRAINING:
        duplicates = sorted(
            {format_pattern(m) for m in training if training.count(m) > 1}
        )
        raise TokenizeError(
            f"training patterns are not distinct: {', '.join(duplicates)}",
            line_number,
        )

    return DisplayRecord(training=unique, readout=readout, line_number=line_number)
