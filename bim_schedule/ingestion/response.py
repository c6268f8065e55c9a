"""Extract candidate material dictionaries from free-form model replies."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

JSON_ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")


def fallback_material() -> Dict[str, Any]:
    """Return the generic record used when a reply cannot be decoded.

    Prices are left out on purpose so the pipeline applies its defaults.
    """

    return {
        "area": "General",
        "location": "General",
        "finish": "Standard Grade",
    }


def extract_json_array(text: str | None) -> Optional[str]:
    """Return the span from the first ``[`` to the last ``]``, if any."""

    if not text:
        return None
    match = JSON_ARRAY_PATTERN.search(text)
    return match.group(0) if match else None


def parse_materials(text: str | None) -> List[Dict[str, Any]]:
    """Decode the JSON array embedded in a model reply.

    Any failure to find or decode a list yields a single fallback record
    instead of an error. Entries that are not JSON objects are dropped.
    """

    snippet = extract_json_array(text)
    if snippet is None:
        logger.warning("Model reply did not contain a JSON array; using fallback material")
        return [fallback_material()]

    try:
        decoded = json.loads(snippet)
    except (ValueError, RecursionError) as exc:
        logger.warning("Failed to decode model reply (%s); using fallback material", exc)
        return [fallback_material()]

    candidates = [item for item in decoded if isinstance(item, dict)]
    dropped = len(decoded) - len(candidates)
    if dropped:
        logger.warning("Dropped %d non-object entries from model reply", dropped)
    return candidates
