"""Normalization of loosely-structured model output into schedule records.

The pipeline is a pure function of its input and the lookup tables it is
given. Steps run in a fixed order: classify each candidate, default its
prices, group by category, number each group, sort, and hand out suppliers by
final position.
"""
from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional

from bim_schedule.core.models import MaterialRecord, PriceRange
from bim_schedule.core.tables import DEFAULT_TABLES, KeywordTable, ScheduleTables

logger = logging.getLogger(__name__)

FINISH_KEYS = ("finish", "finishDescription", "finish_description")
TYPE_KEYS = ("type", "materialType", "material_type")
PRICE_KEYS = ("pricePerSqm", "price_per_sqm")


def _first_match(description: str, table: KeywordTable) -> Optional[str]:
    lowered = description.lower()
    for label, keywords in table:
        if any(keyword in lowered for keyword in keywords):
            return label
    return None


def classify_prefix(description: str, tables: ScheduleTables = DEFAULT_TABLES) -> str:
    """Return the two-letter category prefix for a finish description."""

    return _first_match(description, tables.prefix_keywords) or tables.unknown_prefix


def classify_material_type(description: str, tables: ScheduleTables = DEFAULT_TABLES) -> str:
    """Return the display material type for a finish description."""

    return _first_match(description, tables.type_keywords) or tables.other_type


def _finite_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def normalize_price(value: Any, default: int) -> int:
    """Round a price to the nearest whole unit, or fall back to ``default``.

    Halves round up, so ``44.5`` becomes ``45``.
    """

    number = _finite_number(value)
    if number is None:
        return default
    return int(math.floor(number + 0.5))


def normalize_prices(raw: Any, defaults: PriceRange) -> PriceRange:
    """Default and round each price band field independently."""

    source: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    return PriceRange(
        low=normalize_price(source.get("low"), defaults.low),
        mid=normalize_price(source.get("mid"), defaults.mid),
        high=normalize_price(source.get("high"), defaults.high),
    )


def _lookup(candidate: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in candidate:
            return candidate[key]
    return None


def _text_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def build_record(candidate: Mapping[str, Any], tables: ScheduleTables = DEFAULT_TABLES) -> MaterialRecord:
    """Classify one candidate and normalize its prices.

    The category prefix is always recomputed from the description. The
    material type is only derived when the candidate does not supply one.
    Any incoming code or supplier is ignored.
    """

    description = _lookup(candidate, FINISH_KEYS)
    description = description if isinstance(description, str) else ""
    material_type = _text_or_none(_lookup(candidate, TYPE_KEYS))
    if material_type is None:
        material_type = classify_material_type(description, tables)

    return MaterialRecord(
        finish_description=description,
        category_prefix=classify_prefix(description, tables),
        material_type=material_type,
        price_per_sqm=normalize_prices(_lookup(candidate, PRICE_KEYS), tables.price_defaults),
        area=candidate.get("area"),
        location=candidate.get("location"),
    )


def assign_codes(records: Iterable[MaterialRecord]) -> List[MaterialRecord]:
    """Group records by prefix and number each group from 01 in encounter order."""

    groups: Dict[str, List[MaterialRecord]] = {}
    for record in records:
        groups.setdefault(record.category_prefix, []).append(record)

    coded: List[MaterialRecord] = []
    for prefix, members in groups.items():
        for sequence, record in enumerate(members, start=1):
            coded.append(replace(record, code=f"{prefix}-{sequence:02d}"))
    return coded


def code_sequence(code: str) -> int:
    """Return the numeric suffix of a ``XX-NN`` code."""

    return int(code.rsplit("-", 1)[-1])


def sort_materials(records: Iterable[MaterialRecord]) -> List[MaterialRecord]:
    """Order records by prefix, then by the numeric part of their code."""

    return sorted(records, key=lambda record: (record.category_prefix, code_sequence(record.code)))


def assign_suppliers(
    records: Iterable[MaterialRecord], tables: ScheduleTables = DEFAULT_TABLES
) -> List[MaterialRecord]:
    """Hand out roster entries round-robin by list position."""

    roster = tables.suppliers
    return [
        replace(record, supplier_contact=roster[index % len(roster)].contact_line())
        for index, record in enumerate(records)
    ]


def normalize_materials(
    candidates: Iterable[Mapping[str, Any]], tables: ScheduleTables = DEFAULT_TABLES
) -> List[MaterialRecord]:
    """Turn raw candidate dictionaries into a coded, sorted material schedule."""

    records = [build_record(candidate, tables) for candidate in candidates]
    for record in records:
        logger.debug("Classified %r as %s/%s", record.finish_description, record.category_prefix, record.material_type)

    schedule = assign_suppliers(sort_materials(assign_codes(records)), tables)
    logger.debug("Normalized %d candidate materials", len(schedule))
    return schedule
