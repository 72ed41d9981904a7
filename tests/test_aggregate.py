import pytest

from conftest import EXAMPLE_LINES, EXAMPLE_VALUES, SINGLE_LINE
from segment_search.aggregate import decode_file, decode_lines, decode_record
from segment_search.errors import MalformedTrainingSetError, TokenizeError
from segment_search.tokenizer import parse_record

# Training set with two 5-segment patterns standing in for a 6-segment one
BAD_TRAINING = SINGLE_LINE.replace("cefabd", "cefab")


def test_example_totals(example_lines):
    totals = decode_lines(example_lines)

    assert totals.value_sum == 61229
    assert totals.unique_count == 26
    assert totals.num_records == 10
    assert [r.value for r in totals.records] == EXAMPLE_VALUES
    assert [r.line_number for r in totals.records] == list(range(1, 11))


def test_unique_only_skips_deduction(example_lines):
    totals = decode_lines(example_lines, unique_only=True)

    assert totals.unique_count == 26
    assert totals.value_sum == 0
    assert all(r.digits == () for r in totals.records)


def test_blank_lines_are_ignored():
    totals = decode_lines(["", SINGLE_LINE, "   ", SINGLE_LINE, ""])

    assert totals.value_sum == 5353 * 2
    assert [r.line_number for r in totals.records] == [2, 4]


def test_decode_record():
    assert decode_record(parse_record(SINGLE_LINE)).value == 5353


def test_abort_on_first_error():
    with pytest.raises(MalformedTrainingSetError) as excinfo:
        decode_lines([SINGLE_LINE, BAD_TRAINING, "garbage"])
    assert excinfo.value.line_number == 2


def test_skip_collects_errors():
    totals = decode_lines([SINGLE_LINE, BAD_TRAINING, "garbage", SINGLE_LINE], on_error="skip")

    assert totals.value_sum == 5353 * 2
    assert totals.num_skipped == 2
    assert isinstance(totals.errors[0], MalformedTrainingSetError)
    assert isinstance(totals.errors[1], TokenizeError)
    assert [e.line_number for e in totals.errors] == [2, 3]


def test_unknown_policy():
    with pytest.raises(ValueError, match="on_error"):
        decode_lines([SINGLE_LINE], on_error="retry")


def test_decode_file(example_file):
    totals = decode_file(example_file)

    assert totals.source == str(example_file)
    assert totals.value_sum == 61229
    assert totals.unique_count == 26


def test_decode_missing_file(tmp_path):
    with pytest.raises(OSError):
        decode_file(tmp_path / "missing.txt")


def test_records_keep_their_mapping(example_lines):
    totals = decode_lines(example_lines)
    first = totals.records[0]

    assert first.training == parse_record(example_lines[0]).training
    assert first.mapping.digit_for(first.mapping.mask_for(8)) == 8


def test_unique_only_records_have_no_mapping(example_lines):
    totals = decode_lines(example_lines, unique_only=True)
    assert all(r.mapping is None for r in totals.records)
