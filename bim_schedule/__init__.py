"""Draft BIM material schedules from interior photos."""
from bim_schedule.core import (
    DEFAULT_TABLES,
    MaterialRecord,
    PriceRange,
    ScheduleTables,
    Supplier,
    configure_logging,
)
from bim_schedule.export import (
    SCHEDULE_HEADERS,
    clipboard_summary,
    materials_to_rows,
    write_csv,
    write_excel,
)
from bim_schedule.ingestion import compress_image, parse_materials
from bim_schedule.processing import generate_schedule, normalize_materials, run_pipeline
from bim_schedule.quality import quality_report, validate_material
from bim_schedule.vision import VisionClient

__all__ = [
    "DEFAULT_TABLES",
    "MaterialRecord",
    "PriceRange",
    "SCHEDULE_HEADERS",
    "ScheduleTables",
    "Supplier",
    "VisionClient",
    "clipboard_summary",
    "compress_image",
    "configure_logging",
    "generate_schedule",
    "materials_to_rows",
    "normalize_materials",
    "parse_materials",
    "quality_report",
    "run_pipeline",
    "validate_material",
    "write_csv",
    "write_excel",
]
