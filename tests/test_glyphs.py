from segment_search.glyphs import (
    DIGIT_GLYPHS,
    DIGIT_SEGMENTS,
    SEGMENT_COUNT_PROFILE,
    SEGMENT_DIGITS,
    SEGMENT_NAMES,
    UNIQUE_SEGMENT_COUNTS,
    count_segments,
    mask_from_segments,
    print_glyph_table,
    segments_from_mask,
)


def test_segment_a_is_most_significant_bit():
    assert mask_from_segments("a") == 0b1000000
    assert mask_from_segments("g") == 0b0000001
    assert DIGIT_GLYPHS[0] == 0x77
    assert DIGIT_GLYPHS[8] == 0x7F


def test_segment_digits_match_glyphs():
    for segment in SEGMENT_NAMES:
        lit = [d for d in range(10) if segment in DIGIT_SEGMENTS[d]]
        assert SEGMENT_DIGITS[segment] == lit


def test_segment_digit_sets_are_distinct():
    sets = {frozenset(d) for d in SEGMENT_DIGITS.values()}
    assert len(sets) == 7


def test_unique_segment_counts():
    for count, digit in UNIQUE_SEGMENT_COUNTS.items():
        matching = [d for d in range(10) if count_segments(DIGIT_GLYPHS[d]) == count]
        assert matching == [digit]


def test_count_profile_matches_glyphs():
    profile = {}
    for mask in DIGIT_GLYPHS.values():
        profile[count_segments(mask)] = profile.get(count_segments(mask), 0) + 1
    assert profile == SEGMENT_COUNT_PROFILE


def test_segments_from_mask_sorts_letters():
    assert segments_from_mask(mask_from_segments("gfa")) == "afg"


def test_print_glyph_table(capsys):
    print_glyph_table()
    out = capsys.readouterr().out
    assert "abcdefg" in out
    assert "0x7f" in out
