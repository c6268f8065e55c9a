"""Schedule normalization and pipeline orchestration."""
from bim_schedule.processing.normalization import normalize_materials
from bim_schedule.processing.pipeline import generate_schedule, run_pipeline

__all__ = ["generate_schedule", "normalize_materials", "run_pipeline"]
