"""
Digit deduction for scrambled seven-segment displays.

Recovers which of the 10 training patterns is which digit using only
subset and XOR relationships between patterns:

    1. Segment count alone identifies 1 (2), 7 (3), 4 (4) and 8 (7).
    2. Six segments:  not a superset of 7 -> 6
                      superset of 4       -> 9
                      otherwise           -> 0
    3. c = 6 ^ 8 (the segment 6 is missing), e = 8 ^ 9 (the segment 9 is missing)
    4. Five segments: superset of 7       -> 3
                      missing c           -> 5
                      otherwise           -> 2

No wire permutation is ever searched.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .errors import MalformedTrainingSetError, UnknownPatternError
from .glyphs import (
    FULL_MASK,
    SEGMENT_COUNT_PROFILE,
    SEGMENT_DIGITS,
    SEGMENT_NAMES,
    UNIQUE_SEGMENT_COUNTS,
    count_segments,
    segment_bit,
    segments_from_mask,
)


@dataclass(frozen=True)
class DigitMapping:
    """
    Bijection between the 10 training masks of one display and digits 0-9.

    masks[d] is the scrambled mask showing digit d. Lookups go through a
    dense 128-entry table indexed by mask value.
    """

    masks: tuple[int, ...]
    _table: tuple[Optional[int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.masks) != 10 or len(set(self.masks)) != 10:
            raise MalformedTrainingSetError(
                f"a digit mapping needs 10 distinct masks, got {len(set(self.masks))}"
            )
        if any(not 0 < mask <= FULL_MASK for mask in self.masks):
            raise MalformedTrainingSetError("digit mapping masks must be non-empty 7-bit values")
        table: list[Optional[int]] = [None] * (FULL_MASK + 1)
        for digit, mask in enumerate(self.masks):
            table[mask] = digit
        object.__setattr__(self, "_table", tuple(table))

    def digit_for(self, mask: int) -> int:
        """Return the digit shown by a mask, or raise UnknownPatternError."""
        digit = self._table[mask] if 0 <= mask <= FULL_MASK else None
        if digit is None:
            raise UnknownPatternError(
                f"pattern {segments_from_mask(mask) or repr(mask)} "
                f"is not one of the training patterns"
            )
        return digit

    def mask_for(self, digit: int) -> int:
        """Return the scrambled mask for a digit."""
        return self.masks[digit]

    def __contains__(self, mask) -> bool:
        return isinstance(mask, int) and 0 <= mask <= FULL_MASK and self._table[mask] is not None

    def __len__(self):
        return len(self.masks)

    def items(self) -> list[tuple[int, int]]:
        """(mask, digit) pairs in digit order."""
        return [(mask, digit) for digit, mask in enumerate(self.masks)]

    def wire_map(self) -> dict[str, str]:
        """
        Recover the wire -> segment permutation.

        Each canonical segment is lit by a distinct set of digits, so the
        digits in which a wire is lit name the segment it drives.

        Returns:
            Dict mapping each input wire letter to its display segment letter
        """
        by_digit_set = {frozenset(d): s for s, d in SEGMENT_DIGITS.items()}
        wires = {}
        for wire in SEGMENT_NAMES:
            bit = segment_bit(wire)
            lit_in = frozenset(d for d, mask in enumerate(self.masks) if mask & bit)
            if lit_in not in by_digit_set:
                raise MalformedTrainingSetError(
                    f"wire {wire!r} is lit for digits {sorted(lit_in)}, "
                    f"which matches no segment"
                )
            wires[wire] = by_digit_set[lit_in]
        return wires

    def translate(self, mask: int) -> int:
        """Rewrite a scrambled mask in canonical segment positions."""
        wires = self.wire_map()
        out = 0
        for wire, segment in wires.items():
            if mask & segment_bit(wire):
                out |= segment_bit(segment)
        return out


def _check_profile(masks: list[int]):
    """Validate the segment-count multiset of a training set."""
    if len(masks) != 10:
        raise MalformedTrainingSetError(f"expected 10 training patterns, got {len(masks)}")
    if len(set(masks)) != 10:
        raise MalformedTrainingSetError("training patterns are not distinct")

    for mask in masks:
        if mask & ~FULL_MASK:
            raise MalformedTrainingSetError(f"mask 0x{mask:x} has bits outside the 7 segments")

    profile = {}
    for mask in masks:
        n = count_segments(mask)
        profile[n] = profile.get(n, 0) + 1

    if profile != SEGMENT_COUNT_PROFILE:
        found = ",".join(str(count_segments(m)) for m in sorted(masks, key=count_segments))
        raise MalformedTrainingSetError(
            f"segment counts {{{found}}} do not match {{2,3,4,5,5,5,6,6,6,7}}"
        )


def _assign(found: dict[int, int], digit: int, mask: int):
    if digit in found:
        raise MalformedTrainingSetError(
            f"both {segments_from_mask(found[digit])} and {segments_from_mask(mask)} "
            f"classify as digit {digit}"
        )
    found[digit] = mask


def _require(found: dict[int, int], digits: Iterable[int], group: str):
    missing = [d for d in digits if d not in found]
    if missing:
        raise MalformedTrainingSetError(
            f"no {group} pattern classifies as digit {', '.join(map(str, missing))}"
        )


def deduce(training: Iterable[int]) -> DigitMapping:
    """
    Deduce the digit shown by each of the 10 training masks.

    Args:
        training: The 10 distinct training masks of one display, any order

    Returns:
        DigitMapping covering all 10 masks

    Raises:
        MalformedTrainingSetError: If the masks cannot be digits 0-9, either
            by segment count or because a classification step finds zero
            or several candidates for one digit
    """
    masks = list(training)
    _check_profile(masks)

    found: dict[int, int] = {}

    # Pass 1: unique segment counts
    for mask in masks:
        digit = UNIQUE_SEGMENT_COUNTS.get(count_segments(mask))
        if digit is not None:
            _assign(found, digit, mask)
    m4, m7, m8 = found[4], found[7], found[8]

    # Pass 2: six segments {0, 6, 9}
    for mask in masks:
        if count_segments(mask) != 6:
            continue
        if mask & m7 != m7:
            _assign(found, 6, mask)
        elif mask & m4 == m4:
            _assign(found, 9, mask)
        else:
            _assign(found, 0, mask)
    _require(found, (0, 6, 9), "six-segment")

    # Pass 3: the segments missing from 6 and 9. The profile check fixes m8
    # at all 7 segments, so each XOR is a single segment.
    segment_c = found[6] ^ m8
    segment_e = m8 ^ found[9]

    # Pass 4: five segments {2, 3, 5}
    for mask in masks:
        if count_segments(mask) != 5:
            continue
        if mask & m7 == m7:
            _assign(found, 3, mask)
        elif not mask & segment_c:
            if mask & segment_e:
                raise MalformedTrainingSetError(
                    f"{segments_from_mask(mask)} lacks c but lights e"
                )
            _assign(found, 5, mask)
        else:
            if not mask & segment_e:
                raise MalformedTrainingSetError(
                    f"{segments_from_mask(mask)} lights c but not e"
                )
            _assign(found, 2, mask)
    _require(found, (2, 3, 5), "five-segment")

    return DigitMapping(masks=tuple(found[d] for d in range(10)))
