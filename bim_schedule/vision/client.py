"""Client for the hosted vision model that drafts material schedules."""
from __future__ import annotations

import base64
import json
import logging
import os
from pathlib import Path

import requests

from bim_schedule.core.errors import MissingCredentialError, UpstreamUnavailableError
from bim_schedule.core.utils import is_truthy, load_env_file

logger = logging.getLogger(__name__)
DEFAULT_SECRET_FILE = Path(__file__).resolve().parents[2] / "secrets" / "openai.env"
_AI_ENV_LOADED = False

SCHEDULE_PROMPT = """Analyze this image and generate a BIM material schedule. For each material you identify, provide:
- Area (e.g., Kitchen, Living Room, etc.)
- Location of the finish within that area (e.g., Floor, Splashback, Feature Wall)
- Finish/Grade description
- Material type (e.g., Oak, Marble, Tile, etc.)
- Estimated price per sqm in pounds (realistic UK market price)

IMPORTANT:
- Focus on material identification and realistic UK pricing
- Use your knowledge of UK construction material costs

Return the data as a JSON array of objects with this exact structure:
[
  {
    "area": "Kitchen",
    "location": "Floor",
    "finish": "Grade A Oak Flooring",
    "type": "Oak",
    "pricePerSqm": {"low": 45, "mid": 65, "high": 85}
  }
]

Identify at least 3-5 different materials from the image."""

DEMO_MATERIALS = [
    {
        "area": "Kitchen",
        "location": "Floor",
        "finish": "Grade A Oak Flooring",
        "type": "Oak",
        "pricePerSqm": {"low": 45, "mid": 65, "high": 85},
    },
    {
        "area": "Living Room",
        "location": "Countertop",
        "finish": "Polished Marble Countertop",
        "type": "Marble",
        "pricePerSqm": {"low": 70, "mid": 100, "high": 150},
    },
    {
        "area": "Kitchen",
        "location": "Appliances",
        "finish": "Stainless Steel Appliances",
        "type": "Stainless Steel",
        "pricePerSqm": {"low": 20, "mid": 30, "high": 40},
    },
]


def _ensure_ai_env() -> None:
    """Load AI credentials from a local secrets file once per process."""

    global _AI_ENV_LOADED
    if _AI_ENV_LOADED:
        return

    _AI_ENV_LOADED = True
    secret_location = os.getenv("AI_SECRET_FILE")
    path = Path(secret_location).expanduser() if secret_location else DEFAULT_SECRET_FILE
    load_env_file(path)


class VisionClient:
    """Send a photo to an OpenAI-compatible chat endpoint and return its reply text.

    A single attempt is made per call; failures surface as
    ``UpstreamUnavailableError`` so callers can report them. With
    ``DEMO_MODE=true`` a canned reply is returned and the network is never used.
    """

    def __init__(self) -> None:
        _ensure_ai_env()
        self.api_key = os.getenv("OPENAI_API_KEY") or None
        self.model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.base_url = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.timeout = float(os.getenv("OPENAI_TIMEOUT", "60"))
        self.max_tokens = 2000
        self.demo_mode = is_truthy(os.getenv("DEMO_MODE"))
        self.session = requests.Session() if self.api_key else None

    @property
    def configured(self) -> bool:
        return self.demo_mode or bool(self.api_key)

    def describe_materials(self, image: bytes, mime_type: str = "image/jpeg") -> str:
        """Return the model's free-text reply describing materials in ``image``."""

        if self.demo_mode:
            logger.info("Demo mode enabled; returning sample materials")
            return json.dumps(DEMO_MATERIALS)

        if not self.session:
            raise MissingCredentialError("OpenAI API key not configured")

        payload = self._payload(image, mime_type)
        logger.info("Calling %s with %d-byte image", self.model, len(image))
        try:
            response = self.session.post(
                f"{self.base_url}/chat/completions",
                headers={"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"},
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Vision model request failed: %s", exc)
            raise UpstreamUnavailableError(f"Vision model request failed: {exc}") from exc

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise UpstreamUnavailableError("Unexpected response shape from vision model") from exc

        if not content:
            raise UpstreamUnavailableError("No response from vision model")
        logger.info("Vision model replied with %d characters", len(content))
        return content

    def close(self) -> None:
        if self.session is not None:
            self.session.close()

    def _payload(self, image: bytes, mime_type: str) -> dict:
        encoded = base64.b64encode(image).decode("ascii")
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": SCHEDULE_PROMPT},
                        {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{encoded}"}},
                    ],
                }
            ],
            "max_tokens": self.max_tokens,
        }
