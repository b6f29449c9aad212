"""
Pytest configuration for project root.

Puts src/ on the import path and provides a fake vision model and sample images,
so no test needs network access or API keys.
"""

import io
import sys
from pathlib import Path

import pytest
from PIL import Image

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from llms.llm_abc import VisionLLM  # noqa: E402


class FakeVisionLLM(VisionLLM):
    """Returns a canned response and records every call."""

    def __init__(self, response="", error=None):
        self.response = response
        self.error = error
        self.calls = []

    def call_vision_llm(self, image, prompt, mime_type="image/png"):
        self.calls.append({"size": image.size, "prompt": prompt, "mime_type": mime_type})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_vision_llm():
    return FakeVisionLLM


@pytest.fixture
def png_bytes():
    buffered = io.BytesIO()
    Image.new("RGB", (32, 32), color=(30, 90, 200)).save(buffered, format="PNG")
    return buffered.getvalue()


@pytest.fixture
def png_file(tmp_path, png_bytes):
    path = tmp_path / "scene.png"
    path.write_bytes(png_bytes)
    return path
