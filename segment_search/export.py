"""
Export decode totals as text, JSON or CSV.
"""

import csv
import io
import json

from .aggregate import Totals


def to_text(totals: Totals, verbose: bool = False) -> str:
    """
    Format totals for the terminal.

    Args:
        totals: Totals for one input source
        verbose: Include one line per decoded record

    Returns:
        Human-readable report
    """
    lines = []
    lines.append(f"{totals.source}")

    if verbose:
        for record in totals.records:
            digits = "".join(str(d) for d in record.digits) or "----"
            lines.append(
                f"  line {record.line_number:>4}: {digits}  "
                f"({record.unique_count} unique)"
            )
        for error in totals.errors:
            lines.append(f"  skipped {error}")

    lines.append(f"  {totals.unique_count} unique digits found")
    lines.append(f"  {totals.value_sum} sum of readout values")
    if totals.errors:
        lines.append(f"  {totals.num_skipped} records skipped")

    return "\n".join(lines)


def to_json(totals: Totals) -> str:
    """Export totals and per-record results as JSON."""
    data = {
        "source": totals.source,
        "unique_count": totals.unique_count,
        "value_sum": totals.value_sum,
        "records": [
            {
                "line": r.line_number,
                "digits": list(r.digits),
                "value": r.value,
                "unique_count": r.unique_count,
            }
            for r in totals.records
        ],
        "errors": [
            {"line": e.line_number, "kind": type(e).__name__, "message": e.message}
            for e in totals.errors
        ],
    }
    return json.dumps(data, indent=2)


def to_csv(totals: Totals) -> str:
    """Export per-record results as CSV, one row per decoded record."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["source", "line", "digits", "value", "unique_count"])
    for r in totals.records:
        writer.writerow([
            totals.source,
            r.line_number,
            "".join(str(d) for d in r.digits),
            r.value,
            r.unique_count,
        ])
    return buf.getvalue()
