"""Readout decoding: four scrambled masks -> a 4-digit value."""

from dataclasses import dataclass
from typing import Sequence

from .deduction import DigitMapping
from .errors import ReadoutLengthError, UnknownPatternError
from .glyphs import UNIQUE_DIGITS, UNIQUE_SEGMENT_COUNTS, count_segments
from .tokenizer import NUM_READOUT


@dataclass(frozen=True)
class ReadoutResult:
    """Decoded readout of one display."""

    digits: tuple[int, ...]
    value: int          # digits composed most-significant first, 0-9999
    unique_count: int   # how many digits are 1, 4, 7 or 8


def decode(mapping: DigitMapping, readout: Sequence[int]) -> ReadoutResult:
    """
    Decode the readout masks of a display through its digit mapping.

    Args:
        mapping: Deduced mapping for the same display
        readout: The ordered readout masks, most significant digit first

    Returns:
        ReadoutResult with the digits, composed value and unique-digit count

    Raises:
        ReadoutLengthError: If the readout is not exactly 4 masks
        UnknownPatternError: If a readout mask is not a training mask
    """
    if len(readout) != NUM_READOUT:
        raise ReadoutLengthError(
            f"expected {NUM_READOUT} readout patterns, got {len(readout)}"
        )

    digits = []
    for position, mask in enumerate(readout):
        try:
            digits.append(mapping.digit_for(mask))
        except UnknownPatternError as e:
            raise UnknownPatternError(f"readout digit {position + 1}: {e.message}") from e

    value = 0
    for digit in digits:
        value = value * 10 + digit

    return ReadoutResult(
        digits=tuple(digits),
        value=value,
        unique_count=sum(1 for d in digits if d in UNIQUE_DIGITS),
    )


def count_unique_segments(readout: Sequence[int]) -> int:
    """Count readout masks whose segment count alone identifies the digit."""
    return sum(1 for mask in readout if count_segments(mask) in UNIQUE_SEGMENT_COUNTS)
