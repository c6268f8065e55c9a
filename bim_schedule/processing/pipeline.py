"""Pipeline orchestration from an interior photo to an exported schedule."""
from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import List, Optional

from bim_schedule.core.errors import MissingImageError
from bim_schedule.core.models import MaterialRecord
from bim_schedule.core.tables import DEFAULT_TABLES, ScheduleTables
from bim_schedule.export.sinks import write_csv, write_excel
from bim_schedule.export.templates import materials_to_rows
from bim_schedule.ingestion.images import compress_image
from bim_schedule.ingestion.response import parse_materials
from bim_schedule.processing.normalization import normalize_materials
from bim_schedule.vision.client import VisionClient

logger = logging.getLogger(__name__)


def generate_schedule(
    image: bytes,
    mime_type: str = "image/jpeg",
    client: Optional[VisionClient] = None,
    tables: ScheduleTables = DEFAULT_TABLES,
) -> List[MaterialRecord]:
    """Ask the vision model about ``image`` and normalize its reply.

    Upstream failures propagate; an unparseable reply degrades to the
    single fallback material.
    """

    if not image:
        raise MissingImageError("No image provided")

    client = client or VisionClient()
    reply = client.describe_materials(image, mime_type)
    candidates = parse_materials(reply)
    logger.info("Parsed %d candidate materials from model reply", len(candidates))
    materials = normalize_materials(candidates, tables)
    logger.info("Generated schedule with %d materials", len(materials))
    return materials


def _guess_mime_type(path: Path) -> str:
    return mimetypes.guess_type(path.name)[0] or "image/jpeg"


def run_pipeline(
    image_path: Path,
    output_path: Path,
    sink: str = "csv",
    excel_path: Path | None = None,
    compress: bool = True,
    client: Optional[VisionClient] = None,
) -> Path:
    """Read an image from disk, build its schedule, and write a CSV summary."""

    logger.info("Pipeline starting for image %s", image_path)
    if not image_path.is_file():
        message = f"No image found at {image_path}. Provide a JPEG or PNG photo of the space."
        logger.error(message)
        raise ValueError(message)

    data = image_path.read_bytes()
    mime_type = _guess_mime_type(image_path)
    if compress:
        compressed = compress_image(data, mime_type)
        data, mime_type = compressed.data, compressed.mime_type

    materials = generate_schedule(data, mime_type, client=client)
    rows = materials_to_rows(materials)
    write_csv(rows, output_path)
    logger.info("Wrote CSV output to %s", output_path)

    if sink == "excel":
        excel_target = excel_path or output_path.with_suffix(".xlsx")
        write_excel(rows, excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    return output_path
