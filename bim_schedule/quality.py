"""Lightweight checks that flag suspicious schedule rows for a human to review."""
import logging
from typing import Dict, Iterable, List

from bim_schedule.core.models import MaterialRecord
from bim_schedule.core.tables import DEFAULT_TABLES, ScheduleTables


logger = logging.getLogger(__name__)


def validate_material(record: MaterialRecord, tables: ScheduleTables = DEFAULT_TABLES) -> List[str]:
    """Return a list of quality issues for a single material.

    Nothing here modifies the record; a price band out of order is reported
    as-is rather than corrected.
    """

    issues: List[str] = []

    prices = record.price_per_sqm
    if prices.low > prices.mid:
        issues.append("low price exceeds mid price")
    if prices.mid > prices.high:
        issues.append("mid price exceeds high price")
    if min(prices.low, prices.mid, prices.high) < 0:
        issues.append("negative price")

    if not record.finish_description.strip():
        issues.append("missing finish description")

    if record.category_prefix == tables.unknown_prefix:
        issues.append("unclassified material")

    return issues


def quality_report(
    records: Iterable[MaterialRecord], tables: ScheduleTables = DEFAULT_TABLES
) -> Dict[str, List[str]]:
    """Map material codes to their issues, skipping clean records."""

    report: Dict[str, List[str]] = {}
    for record in records:
        issues = validate_material(record, tables)
        if issues:
            report[record.code] = issues
            logger.warning("Quality issues for %s: %s", record.code, "; ".join(issues))
    return report
