"""Core building blocks for the schedule package."""
from bim_schedule.core.errors import (
    InvalidImageError,
    MissingCredentialError,
    MissingImageError,
    ScheduleError,
    UpstreamUnavailableError,
)
from bim_schedule.core.logging import configure_logging
from bim_schedule.core.models import MaterialRecord, PriceRange
from bim_schedule.core.tables import DEFAULT_TABLES, ScheduleTables, Supplier

__all__ = [
    "configure_logging",
    "DEFAULT_TABLES",
    "InvalidImageError",
    "MaterialRecord",
    "MissingCredentialError",
    "MissingImageError",
    "PriceRange",
    "ScheduleError",
    "ScheduleTables",
    "Supplier",
    "UpstreamUnavailableError",
]
