import json

from conftest import SINGLE_LINE
from segment_search.aggregate import decode_lines
from segment_search.export import to_csv, to_json, to_text


def test_to_text(example_lines):
    text = to_text(decode_lines(example_lines, source="example.txt"))

    assert text.splitlines() == [
        "example.txt",
        "  26 unique digits found",
        "  61229 sum of readout values",
    ]


def test_to_text_verbose_lists_records_and_skips():
    totals = decode_lines([SINGLE_LINE, "bad line"], on_error="skip")
    text = to_text(totals, verbose=True)

    assert "line    1: 5353  (0 unique)" in text
    assert "skipped line 2:" in text
    assert "1 records skipped" in text


def test_to_json(example_lines):
    data = json.loads(to_json(decode_lines(example_lines)))

    assert data["value_sum"] == 61229
    assert data["unique_count"] == 26
    assert data["records"][0] == {"line": 1, "digits": [8, 3, 9, 4], "value": 8394, "unique_count": 2}
    assert data["errors"] == []


def test_to_json_reports_errors():
    data = json.loads(to_json(decode_lines(["bad line"], on_error="skip")))
    assert data["errors"][0]["kind"] == "TokenizeError"
    assert data["errors"][0]["line"] == 1


def test_to_csv(example_lines):
    rows = to_csv(decode_lines(example_lines, source="ex")).splitlines()

    assert rows[0] == "source,line,digits,value,unique_count"
    assert rows[1] == "ex,1,8394,8394,2"
    assert len(rows) == 11
