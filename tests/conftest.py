"""Shared fixtures: the canonical 10-record example and scrambling helpers."""

import pytest

from segment_search.glyphs import DIGIT_GLYPHS, SEGMENT_NAMES, segment_bit

EXAMPLE_LINES = """\
be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe
edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc
fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg
fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb
aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea
fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb
dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe
bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef
egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb
gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce
""".splitlines()

EXAMPLE_VALUES = [8394, 9781, 1197, 9361, 4873, 8418, 4548, 1625, 8717, 4315]

SINGLE_LINE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)


def scramble(mask: int, wiring: dict[str, str]) -> int:
    """Rewrite a canonical mask through a segment -> wire relabeling."""
    out = 0
    for segment in SEGMENT_NAMES:
        if mask & segment_bit(segment):
            out |= segment_bit(wiring[segment])
    return out


def scrambled_glyphs(wiring: dict[str, str]) -> list[int]:
    """Digit glyphs 0-9 as they appear on a display wired by `wiring`."""
    return [scramble(DIGIT_GLYPHS[d], wiring) for d in range(10)]


@pytest.fixture
def example_lines():
    return list(EXAMPLE_LINES)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "example.txt"
    path.write_text("\n".join(EXAMPLE_LINES) + "\n", encoding="utf-8")
    return path
