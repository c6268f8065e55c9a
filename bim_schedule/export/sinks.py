"""Writers for exporting schedule rows to CSV and Excel."""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any, Dict, Iterable, List

from bim_schedule.export.templates import SCHEDULE_HEADERS

SHEET_TITLE = "bim_schedule"


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def _write_csv_rows(handle, rows: List[Dict[str, Any]]) -> None:
    writer = csv.DictWriter(handle, fieldnames=SCHEDULE_HEADERS)
    writer.writeheader()
    writer.writerows(rows)


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write schedule rows to a CSV file; the header is written even when empty."""

    rows = list(rows)
    ensure_output_dir(output_path)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        _write_csv_rows(csvfile, rows)


def schedule_csv_bytes(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Return CSV content suitable for a browser download."""

    buffer = io.StringIO(newline="")
    _write_csv_rows(buffer, list(rows))
    return buffer.getvalue().encode("utf-8")


def _build_workbook(rows: List[Dict[str, Any]]):
    try:
        from openpyxl import Workbook
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError("openpyxl is required for Excel sinks") from exc

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(SCHEDULE_HEADERS)
    for row in rows:
        sheet.append([row.get(header, "") for header in SCHEDULE_HEADERS])
    return workbook


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write schedule rows to an Excel workbook using openpyxl."""

    ensure_output_dir(output_path)
    _build_workbook(list(rows)).save(output_path)


def schedule_excel_bytes(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Return an in-memory Excel workbook for a browser download."""

    buffer = io.BytesIO()
    _build_workbook(list(rows)).save(buffer)
    return buffer.getvalue()
