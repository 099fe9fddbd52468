"""CSV export of the journal."""

import logging
from datetime import date
from pathlib import Path
from typing import Iterable

from daybook.models import EquityRow, JournalEntry

logger = logging.getLogger(__name__)

CSV_HEADER = ["date", "startBalance", "endBalance", "pl", "retPct", "notes"]


def _clean_notes(notes: str) -> str:
    # Commas would shift the columns
    return notes.replace(",", ";").replace("\r", " ").replace("\n", " ")


def build_csv(series: Iterable[EquityRow], entries: Iterable[JournalEntry]) -> str:
    """Render the equity series as CSV text.

    Args:
        series: Equity rows, one output line each.
        entries: Journal entries supplying the notes for each date.

    Returns:
        CSV text with a header line, lines separated by newlines.
    """
    notes_by_date = {e.date: e.notes for e in entries}
    lines = [",".join(CSV_HEADER)]
    for row in series:
        lines.append(
            ",".join(
                [
                    row.date.isoformat(),
                    str(row.start),
                    str(row.end),
                    str(row.pl),
                    str(row.ret_pct),
                    _clean_notes(notes_by_date.get(row.date, "")),
                ]
            )
        )
    return "\n".join(lines)


def export_filename(today: date) -> str:
    """Name of the export file for a given day."""
    return f"diario_trader_{today.isoformat()}.csv"


def write_csv(
    directory: Path,
    series: Iterable[EquityRow],
    entries: Iterable[JournalEntry],
    today: date,
) -> Path:
    """Write the CSV export into a directory.

    Args:
        directory: Output directory, created if missing.
        series: Equity rows to export.
        entries: Journal entries supplying notes.
        today: Date used in the file name.

    Returns:
        Path of the written file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(today)
    path.write_text(build_csv(series, entries), encoding="utf-8")
    logger.info("Exported journal to %s", path)
    return path
