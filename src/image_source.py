# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import logging
import os
import tempfile
from contextlib import contextmanager

from PIL import Image


class ImageSourceError(ValueError):
    """Raised when an uploaded or local file cannot be read as an image."""


def save_upload(file_storage, upload_dir="uploads") -> str:
    """
    Writes an uploaded file to a unique temporary path inside upload_dir.

    Args:
        file_storage: The uploaded file (a werkzeug FileStorage or any object with save()).
        upload_dir (str): Directory for temporary uploads, created if missing.
    Returns:
        str: Path of the written file. The caller owns its deletion.
    """
    os.makedirs(upload_dir, exist_ok=True)
    suffix = os.path.splitext(file_storage.filename or "")[1]
    fd, temp_path = tempfile.mkstemp(suffix=suffix, dir=upload_dir)
    try:
        with os.fdopen(fd, "wb") as f:
            file_storage.save(f)
    except Exception:
        os.remove(temp_path)
        raise
    return temp_path


@contextmanager
def open_image(path, cleanup=True):
    """
    Opens an image and yields (image, mime_type).

    With cleanup set, the file is deleted when the block exits, on both the
    success and the failure path.
    """
    try:
        try:
            image = Image.open(path)
            image.load()
        except OSError as e:
            raise ImageSourceError(f"Cannot read image {path}: {e}") from e
        mime_type = Image.MIME.get(image.format, "image/png")
        yield image, mime_type
    finally:
        if cleanup and os.path.exists(path):
            os.remove(path)
            logging.debug(f"Removed temporary image {path}.")
