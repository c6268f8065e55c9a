"""Input handling: uploaded images and raw model replies."""
from bim_schedule.ingestion.images import CompressedImage, compress_image
from bim_schedule.ingestion.response import extract_json_array, fallback_material, parse_materials

__all__ = [
    "CompressedImage",
    "compress_image",
    "extract_json_array",
    "fallback_material",
    "parse_materials",
]
