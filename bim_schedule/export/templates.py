"""Mapping utilities that turn material records into schedule rows."""
from typing import Any, Dict, Iterable, List

from bim_schedule.core.models import MaterialRecord


SCHEDULE_HEADERS = [
    "Code",
    "Area",
    "Location of Finish",
    "Finish",
    "Supplier and Contact",
    "Price per sqm (Low)",
    "Price per sqm (Mid)",
    "Price per sqm (High)",
]

CURRENCY_SYMBOL = "£"


def _clean_text(value: object) -> str:
    if value is None:
        return ""
    return " ".join(str(value).split())


def material_to_row(record: MaterialRecord) -> Dict[str, Any]:
    """Convert a MaterialRecord into a schedule row keyed by ``SCHEDULE_HEADERS``."""

    prices = record.price_per_sqm
    return {
        "Code": record.code,
        "Area": _clean_text(record.area),
        "Location of Finish": _clean_text(record.location),
        "Finish": _clean_text(record.finish_description),
        "Supplier and Contact": record.supplier_contact,
        "Price per sqm (Low)": prices.low,
        "Price per sqm (Mid)": prices.mid,
        "Price per sqm (High)": prices.high,
    }


def materials_to_rows(records: Iterable[MaterialRecord]) -> List[Dict[str, Any]]:
    """Convert an iterable of MaterialRecord objects into schedule rows."""

    return [material_to_row(record) for record in records]


def clipboard_summary(records: Iterable[MaterialRecord]) -> str:
    """Render a pipe-delimited, one-line-per-material text summary."""

    lines = []
    for record in records:
        prices = record.price_per_sqm
        fields = [
            record.code,
            _clean_text(record.area) or "-",
            _clean_text(record.location) or "-",
            _clean_text(record.finish_description) or "-",
            record.supplier_contact or "-",
            f"Low: {CURRENCY_SYMBOL}{prices.low}",
            f"Mid: {CURRENCY_SYMBOL}{prices.mid}",
            f"High: {CURRENCY_SYMBOL}{prices.high}",
        ]
        lines.append(" | ".join(fields))
    return "\n".join(lines)
