"""Export destinations for the material schedule."""
from bim_schedule.export.sinks import (
    ensure_output_dir,
    schedule_csv_bytes,
    schedule_excel_bytes,
    write_csv,
    write_excel,
)
from bim_schedule.export.templates import (
    SCHEDULE_HEADERS,
    clipboard_summary,
    material_to_row,
    materials_to_rows,
)

__all__ = [
    "SCHEDULE_HEADERS",
    "clipboard_summary",
    "ensure_output_dir",
    "material_to_row",
    "materials_to_rows",
    "schedule_csv_bytes",
    "schedule_excel_bytes",
    "write_csv",
    "write_excel",
]
