# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import base64
from io import BytesIO

from PIL import Image

# Formats every provider accepts as inline data; anything else is sent as PNG.
INLINE_FORMATS = {"image/png": "PNG", "image/jpeg": "JPEG", "image/webp": "WEBP"}


def convert_pil_image2base64(image: Image.Image, mime_type: str = "image/png") -> tuple[str, str]:
    """Encodes an image for a data URL and returns (base64 string, mime type used)."""
    image_format = INLINE_FORMATS.get(mime_type)
    if image_format is None:
        image_format, mime_type = "PNG", "image/png"
    if image_format == "JPEG" and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    buffered = BytesIO()
    image.save(buffered, format=image_format)
    img_str = base64.b64encode(buffered.getvalue()).decode("utf-8")
    return img_str, mime_type


def to_data_url(image: Image.Image, mime_type: str = "image/png") -> str:
    img_str, mime_type = convert_pil_image2base64(image, mime_type)
    return f"data:{mime_type};base64,{img_str}"


def clean_output_text(output_text) -> str:
    # Chat models may answer with a list of content blocks instead of a string.
    if isinstance(output_text, list):
        parts = []
        for part in output_text:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return output_text or ""
