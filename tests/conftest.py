"""Pytest configuration to make the local package importable without installation."""
import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import bim_schedule.vision.client as vision_client
from bim_schedule.cli import main as cli_main

MANAGED_ENV = ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "OPENAI_TIMEOUT", "DEMO_MODE")


@pytest.fixture(autouse=True)
def isolate_ai_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from real credentials and restore env vars afterwards."""

    for key in MANAGED_ENV:
        # setenv records the original value, so writes made later in the test are undone too.
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("AI_SECRET_FILE", str(tmp_path / "missing.env"))
    monkeypatch.setattr(vision_client, "_AI_ENV_LOADED", False)


def _encode(size: tuple[int, int], fmt: str, mode: str = "RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color=(180, 140, 90) if mode == "RGB" else (180, 140, 90, 255)).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """A small landscape PNG."""

    return _encode((64, 48), "PNG")


@pytest.fixture
def make_image():
    """Factory for encoded test images of a given size and format."""

    return _encode


@pytest.fixture
def room_photo(tmp_path: Path, png_bytes: bytes) -> Path:
    """Write a PNG to disk for CLI and pipeline tests."""

    path = tmp_path / "room.png"
    path.write_bytes(png_bytes)
    return path


class StubVisionClient:
    """Stand-in for VisionClient that returns a canned reply."""

    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.calls: list[tuple[int, str]] = []

    def describe_materials(self, image: bytes, mime_type: str = "image/jpeg") -> str:
        self.calls.append((len(image), mime_type))
        return self.reply


@pytest.fixture
def stub_client():
    """Build a stub vision client around a reply string."""

    return StubVisionClient


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch):
    """Helper to invoke the CLI with custom arguments inside tests."""

    def _run(args: list[str]) -> None:
        monkeypatch.setattr(sys, "argv", ["bim_schedule.cli", *args])
        cli_main()

    return _run
