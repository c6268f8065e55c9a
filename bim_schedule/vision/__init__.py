"""Vision model access."""
from bim_schedule.vision.client import VisionClient

__all__ = ["VisionClient"]
