"""HTTP API that turns an uploaded interior photo into a material schedule.

Run with ``uvicorn bim_schedule.api:app --reload``.
"""
from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse

from bim_schedule.core.errors import MissingCredentialError, MissingImageError
from bim_schedule.core.logging import configure_logging
from bim_schedule.processing.pipeline import generate_schedule
from bim_schedule.vision.client import VisionClient

logger = logging.getLogger(__name__)

configure_logging()
app = FastAPI(title="BIM Material Schedule")


def _error(status_code: int, error: str, exc: Exception | None = None) -> JSONResponse:
    body = {"error": error}
    if exc is not None:
        body["details"] = str(exc) or "Unknown error"
        body["type"] = type(exc).__name__
    return JSONResponse(body, status_code=status_code)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/debug")
def debug():
    """Report whether credentials are present without revealing them."""

    api_key = os.getenv("OPENAI_API_KEY") or ""
    return {
        "hasApiKey": bool(api_key),
        "apiKeyLength": len(api_key),
        "apiKeyStartsWithSk": api_key.startswith("sk-"),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/api/generate-materials")
def generate_materials(image: Optional[UploadFile] = File(None)):
    contents, mime_type = b"", "image/jpeg"
    if image is not None:
        contents = image.file.read()
        mime_type = image.content_type or mime_type
        logger.info("Image received: %s (%d bytes)", image.filename, len(contents))

    client = VisionClient()
    try:
        materials = generate_schedule(contents, mime_type, client=client)
    except MissingImageError as exc:
        logger.info("Rejected request without an image")
        return _error(400, str(exc))
    except MissingCredentialError as exc:
        logger.error("Vision model credentials missing")
        return _error(500, "OpenAI API key not configured", exc)
    except Exception as exc:
        logger.exception("Error generating materials")
        return _error(500, "Failed to generate materials", exc)
    finally:
        client.close()

    return {"materials": [material.to_payload() for material in materials]}
