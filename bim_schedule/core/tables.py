"""Static lookup tables used to classify materials and assign suppliers.

The tables are immutable and built once at import time as ``DEFAULT_TABLES``.
Callers pass a ``ScheduleTables`` instance into the normalization pipeline so
tests (or other deployments) can substitute their own roster or keywords.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from bim_schedule.core.models import PriceRange

KeywordTable = Tuple[Tuple[str, Tuple[str, ...]], ...]


@dataclass(frozen=True)
class Supplier:
    """A vendor entry from the static supplier roster."""

    name: str
    email: str
    phone: str

    def contact_line(self) -> str:
        return f"{self.name} ({self.email}, {self.phone})"


# Checked top to bottom, first match wins.
PREFIX_KEYWORDS: KeywordTable = (
    ("WD", ("wood", "oak", "walnut")),
    ("MT", ("metal", "steel", "aluminium")),
    ("GL", ("glass", "mirror")),
    ("CT", ("tile", "ceramic", "porcelain")),
    ("ST", ("stone", "marble", "granite")),
    ("PT", ("paint", "wallpaper", "plaster")),
)

MATERIAL_TYPE_KEYWORDS: KeywordTable = (
    ("Oak", ("oak", "wood")),
    ("Marble", ("marble", "stone")),
    ("Tile", ("tile", "ceramic", "porcelain")),
    ("Paint", ("paint", "plaster")),
    ("Upholstery", ("velvet", "upholstery")),
    ("Glass", ("glass", "mirror")),
    ("Metal", ("metal", "steel")),
)

SUPPLIER_ROSTER: Tuple[Supplier, ...] = (
    Supplier("Travis Perkins", "customerservices@travisperkins.co.uk", "0345 0268 268"),
    Supplier("Jewson", "customerservices@jewson.co.uk", "0800 539 766"),
    Supplier("Wickes", "customercare@wickes.co.uk", "0330 333 3300"),
    Supplier("B&Q", "customer.services@diy.com", "0333 014 3097"),
    Supplier("Screwfix", "customerservices@screwfix.com", "03330 112 112"),
)

DEFAULT_PRICES = PriceRange(low=50, mid=80, high=110)


@dataclass(frozen=True)
class ScheduleTables:
    """Bundle of read-only configuration consumed by the normalization pipeline."""

    prefix_keywords: KeywordTable = PREFIX_KEYWORDS
    type_keywords: KeywordTable = MATERIAL_TYPE_KEYWORDS
    suppliers: Tuple[Supplier, ...] = SUPPLIER_ROSTER
    price_defaults: PriceRange = DEFAULT_PRICES
    unknown_prefix: str = "UN"
    other_type: str = "Other"

    def __post_init__(self) -> None:
        if not self.suppliers:
            raise ValueError("Supplier roster must contain at least one supplier")


DEFAULT_TABLES = ScheduleTables()
