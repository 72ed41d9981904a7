"""
Glyph tables for a seven-segment display.

7-segment display layout:
     aaa
    b   c
    b   c
     ddd
    e   f
    e   f
     ggg

Segments are stored as bits of a 7-bit mask, segment 'a' in the most
significant position:

    segment  a  b  c  d  e  f  g
    bit      6  5  4  3  2  1  0
"""

SEGMENT_NAMES = ['a', 'b', 'c', 'd', 'e', 'f', 'g']

FULL_MASK = 0b1111111

# Canonical (unscrambled) segment letters for each digit
DIGIT_SEGMENTS = {
    0: "abcefg",
    1: "cf",
    2: "acdeg",
    3: "acdfg",
    4: "bcdf",
    5: "abdfg",
    6: "abdefg",
    7: "acf",
    8: "abcdefg",
    9: "abcdfg",
}

# Digits that light each segment on an unscrambled display.
# No two segments share the same digit set.
SEGMENT_DIGITS = {
    'a': [0, 2, 3, 5, 6, 7, 8, 9],
    'b': [0, 4, 5, 6, 8, 9],
    'c': [0, 1, 2, 3, 4, 7, 8, 9],
    'd': [2, 3, 4, 5, 6, 8, 9],
    'e': [0, 2, 6, 8],
    'f': [0, 1, 3, 4, 5, 6, 7, 8, 9],
    'g': [0, 2, 3, 5, 6, 8, 9],
}

# Digits identifiable by segment count alone, keyed by that count
UNIQUE_SEGMENT_COUNTS = {2: 1, 3: 7, 4: 4, 7: 8}
UNIQUE_DIGITS = frozenset(UNIQUE_SEGMENT_COUNTS.values())

# Number of patterns with each segment count in a complete set of 10 digits
SEGMENT_COUNT_PROFILE = {2: 1, 3: 1, 4: 1, 5: 3, 6: 3, 7: 1}


def segment_bit(segment: str) -> int:
    """Return the mask bit for a segment letter ('a' -> 0b1000000)."""
    return 1 << (6 - SEGMENT_NAMES.index(segment))


def mask_from_segments(segments: str) -> int:
    """Convert a string of segment letters to a mask."""
    mask = 0
    for segment in segments:
        mask |= segment_bit(segment)
    return mask


def segments_from_mask(mask: int) -> str:
    """Convert a mask back to its segment letters in 'a'..'g' order."""
    return "".join(s for s in SEGMENT_NAMES if mask & segment_bit(s))


def count_segments(mask: int) -> int:
    """Count the lit segments in a mask."""
    return bin(mask & FULL_MASK).count('1')


DIGIT_GLYPHS = {digit: mask_from_segments(s) for digit, s in DIGIT_SEGMENTS.items()}


def print_glyph_table():
    """Print the canonical digit glyphs with their masks."""
    print("Seven-Segment Digit Glyphs")
    print("=" * 50)
    print(f"{'Digit':>5} | {'Segments':<8} | ", end="")
    print(" ".join(SEGMENT_NAMES), end="")
    print(" | Count | Mask")
    print("-" * 50)

    for digit in range(10):
        mask = DIGIT_GLYPHS[digit]
        bits = " ".join(
            "1" if mask & segment_bit(s) else "0" for s in SEGMENT_NAMES
        )
        unique = "*" if digit in UNIQUE_DIGITS else " "
        print(
            f"{digit:>5} | {DIGIT_SEGMENTS[digit]:<8} | {bits} | "
            f"{count_segments(mask):>4}{unique} | 0x{mask:02x}"
        )

    print("-" * 50)
    print("* unique segment count")


if __name__ == "__main__":
    print_glyph_table()
