# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import re
from typing import Iterable

EVENT_TYPES = (
    "flood",
    "fire",
    "cyclone",
    "drought",
    "terrain_instability",
    "erosion",
    "communication_failure",
    "infrastructure_collapse",
    "non_satellite",
    "unknown",
)

# Highest priority first: flood wins over fire when both are reported.
FACTOR_PRIORITY = (
    ("flood", "flood"),
    ("fire", "fire"),
    ("cyclone", "cyclone"),
    ("terrain_instability", "terrain"),
    ("erosion", "erosion"),
    ("communication_failure", "communication"),
    ("infrastructure_collapse", "infrastructure"),
)

# Whole-word matches so that e.g. "surface water" is not read as "face".
NON_SATELLITE_PATTERNS = (
    re.compile(r"non[-_ ]?satellite"),
    re.compile(r"not an? (?:satellite|aerial|overhead)"),
    re.compile(r"\bfaces?\b"),
    re.compile(r"\bdocuments?\b"),
    re.compile(r"\bindoors?\b"),
)


def is_non_satellite(text: str) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(pattern.search(lowered) for pattern in NON_SATELLITE_PATTERNS)


def classify_event(
    factors: Iterable[str], event_type: str = "unknown", signal: str = ""
) -> str:
    """
    Derives a single event type from the reported risk factors.

    A non-satellite signal in the factors, the event type or the raw event text
    overrides everything else. An explicit canonical event type is kept as is.
    Otherwise the factors are scanned in FACTOR_PRIORITY order and the first
    category whose keyword appears in any factor is returned.

    Args:
        factors (iterable of str): Free-text risk factors.
        event_type (str): Event type already resolved from explicit fields.
        signal (str): The raw event text reported by the model, if any.
    Returns:
        str: One of EVENT_TYPES.
    """
    factors = [factor.lower() for factor in factors if isinstance(factor, str)]

    if any(is_non_satellite(text) for text in [event_type or "", signal or ""] + factors):
        return "non_satellite"

    if event_type in EVENT_TYPES and event_type != "unknown":
        return event_type

    for category, keyword in FACTOR_PRIORITY:
        if any(keyword in factor for factor in factors):
            return category
    return "unknown"
