# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import json
import re

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)


class ParseError(ValueError):
    """Raised when no JSON object can be recovered from a model response."""


def strip_code_fences(raw_text: str) -> str:
    return CODE_FENCE_PATTERN.sub("", raw_text).strip()


def extract_json_object(raw_text: str) -> dict:
    """
    Extracts the JSON object embedded in a vision model response.

    The response may be wrapped in markdown fences or surrounded by prose, so the
    span from the first '{' to the last '}' is decoded after the fences are removed.

    Args:
        raw_text (str): The verbatim text returned by the vision model.
    Returns:
        dict: The decoded object.
    Raises:
        ParseError: If there is no '{...}' span or it does not decode to an object.
    """
    if not isinstance(raw_text, str):
        raise ParseError("no valid JSON object found")

    text = strip_code_fences(raw_text)
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ParseError("no valid JSON object found")

    try:
        parsed = json.loads(text[start : end + 1])
    except json.JSONDecodeError as e:
        raise ParseError("no valid JSON object found") from e

    if not isinstance(parsed, dict):
        raise ParseError("no valid JSON object found")
    return parsed
