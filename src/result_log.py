# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import json
import threading
from pathlib import Path

from assembler import LOG_HEADER


class ResultLog:
    """
    Append-only CSV log of decisions, one flattened line per analyzed image.
    Appends are serialized so concurrent requests cannot interleave lines.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def append(self, line: str):
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            write_header = not self.path.exists()
            with open(self.path, "a", newline="") as f:
                if write_header:
                    f.write(LOG_HEADER + "\n")
                f.write(line + "\n")


def append_to_json(data, file_path):
    """
    Append a single dictionary to a JSON file, creating the file if it doesn't exist.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if file_path.exists():
        with open(file_path, "r+") as f:
            try:
                existing_data = json.load(f)
                if not isinstance(existing_data, list):
                    existing_data = [existing_data]
            except json.JSONDecodeError:
                existing_data = []
            existing_data.append(data)
            f.seek(0)
            json.dump(existing_data, f, indent=2)
            f.truncate()
    else:
        with open(file_path, "w") as f:
            json.dump([data], f, indent=2)
