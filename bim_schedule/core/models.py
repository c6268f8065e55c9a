"""Data models for material schedule line items."""
from dataclasses import dataclass, asdict, field
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class PriceRange:
    """Price per square metre band in whole currency units."""

    low: int
    mid: int
    high: int

    def to_dict(self) -> Dict[str, int]:
        return {"low": self.low, "mid": self.mid, "high": self.high}


@dataclass
class MaterialRecord:
    """Represents a single normalized row of the BIM material schedule."""

    finish_description: str
    category_prefix: str = "UN"
    material_type: Optional[str] = None
    code: str = ""
    price_per_sqm: PriceRange = field(default_factory=lambda: PriceRange(50, 80, 110))
    supplier_contact: str = ""
    area: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation using attribute names."""

        return asdict(self)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON shape served to the presentation layer."""

        return {
            "code": self.code,
            "categoryPrefix": self.category_prefix,
            "area": self.area,
            "location": self.location,
            "finish": self.finish_description,
            "type": self.material_type,
            "supplierContact": self.supplier_contact,
            "pricePerSqm": self.price_per_sqm.to_dict(),
        }
