# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from abc import ABC, abstractmethod
from PIL import Image


class VisionLLM(ABC):
    """A vision model that answers a text instruction about one image."""

    @abstractmethod
    def call_vision_llm(self, image: Image.Image, prompt: str, mime_type: str = "image/png") -> str:
        """Returns the model's free-text answer, which may or may not hold JSON."""
