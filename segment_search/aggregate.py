"""
Run the decode pipeline over every record of an input and total the results.

Error policy:
- "abort": the first failing record stops the run; its error is re-raised
  with the line number attached.
- "skip": failing records are collected in Totals.errors and left out of
  the totals.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from .decoder import ReadoutResult, count_unique_segments, decode
from .deduction import DigitMapping, deduce
from .errors import SegmentSearchError
from .tokenizer import DisplayRecord, parse_record

ON_ERROR_CHOICES = ("abort", "skip")


@dataclass
class RecordResult:
    """Outcome for one decoded record."""

    line_number: Optional[int]
    digits: tuple[int, ...]
    value: int
    unique_count: int
    training: frozenset[int] = field(default=frozenset(), repr=False, compare=False)
    mapping: Optional[DigitMapping] = field(default=None, repr=False, compare=False)


@dataclass
class Totals:
    """Accumulated results over one input source."""

    source: str = "<input>"
    unique_count: int = 0
    value_sum: int = 0
    records: list[RecordResult] = field(default_factory=list)
    errors: list[SegmentSearchError] = field(default_factory=list)

    @property
    def num_records(self) -> int:
        return len(self.records)

    @property
    def num_skipped(self) -> int:
        return len(self.errors)

    def add(self, result: RecordResult):
        self.records.append(result)
        self.unique_count += result.unique_count
        self.value_sum += result.value


def decode_record(record: DisplayRecord) -> ReadoutResult:
    """Deduce a record's digit mapping and decode its readout."""
    mapping = deduce(record.training)
    return decode(mapping, record.readout)


def decode_lines(
    lines: Iterable[str],
    on_error: str = "abort",
    unique_only: bool = False,
    source: str = "<input>",
) -> Totals:
    """
    Decode every non-blank line and accumulate both totals.

    Args:
        lines: Record lines
        on_error: "abort" or "skip"
        unique_only: Only count unique-segment digits by segment count,
            without deducing mappings (value_sum stays 0)
        source: Name reported in the totals

    Returns:
        Totals for all decoded records
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(
            f"on_error must be one of {', '.join(ON_ERROR_CHOICES)}, got {on_error!r}"
        )

    totals = Totals(source=source)

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            record = parse_record(line, line_number)
            if unique_only:
                result = RecordResult(
                    line_number=line_number,
                    digits=(),
                    value=0,
                    unique_count=count_unique_segments(record.readout),
                )
            else:
                mapping = deduce(record.training)
                readout = decode(mapping, record.readout)
                result = RecordResult(
                    line_number=line_number,
                    digits=readout.digits,
                    value=readout.value,
                    unique_count=readout.unique_count,
                    training=record.training,
                    mapping=mapping,
                )
        except SegmentSearchError as e:
            e.line_number = line_number
            if on_error == "abort":
                raise
            totals.errors.append(e)
            continue

        totals.add(result)

    return totals


def decode_file(
    path: Union[str, Path],
    on_error: str = "abort",
    unique_only: bool = False,
) -> Totals:
    """Read a whole input file into memory and decode it."""
    text = Path(path).read_text(encoding="utf-8")
    return decode_lines(
        text.splitlines(),
        on_error=on_error,
        unique_only=unique_only,
        source=str(path),
    )
