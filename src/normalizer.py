# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from classifier import EVENT_TYPES, classify_event

# Resolution tables: the first field present with a usable value wins.
# Field names drifted across prompt versions; extend these lists for new ones.
EVENT_TYPE_FIELDS = ("eventType", "event_type")
EVENT_TEXT_FIELDS = ("event",)
EVENT_KEYWORDS = ("flood", "fire", "cyclone", "drought")
AREA_FIELDS = (
    "areaAffectedPercent",
    "area_affected_percent",
    "event_area_percent",
    "severity_percent",
)
# (field, max of the scale the model reports it on)
SEVERITY_FIELDS = (
    ("severityScore", 100),
    ("intensity_rating", 10),
    ("severity_rating", 5),
)
FACTOR_FIELDS = ("factors",)
SUMMARY_FIELDS = ("summary",)


@dataclass(frozen=True)
class Observation:
    event_type: str = "unknown"
    factors: tuple = field(default_factory=tuple)
    area_affected_percent: float = 0.0
    severity_score: float = 0.0
    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "eventType": self.event_type,
            "factors": list(self.factors),
            "areaAffectedPercent": self.area_affected_percent,
            "severityScore": self.severity_score,
            "summary": self.summary,
        }


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


def as_number(value: Any) -> float | None:
    """Returns value as a finite float, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().rstrip("%"))
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def canonical_event_type(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    event_type = value.strip().lower().replace("-", "_").replace(" ", "_")
    if event_type in EVENT_TYPES and event_type != "unknown":
        return event_type
    return None


def _first_number(parsed: Mapping, fields) -> tuple[str, float] | None:
    for name in fields:
        if name not in parsed or parsed[name] is None:
            continue
        number = as_number(parsed[name])
        if number is None:
            logging.warning(
                f"Ignoring non-numeric value {parsed[name]!r} for field '{name}'."
            )
            continue
        return name, number
    return None


def _resolve_factors(parsed: Mapping) -> tuple:
    for name in FACTOR_FIELDS:
        raw = parsed.get(name)
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, (list, tuple)):
            continue
        factors = []
        seen = set()
        for factor in raw:
            if not isinstance(factor, str) or not factor.strip():
                continue
            factor = factor.strip()
            if factor.lower() in seen:
                continue
            seen.add(factor.lower())
            factors.append(factor)
        return tuple(factors)
    return ()


def _resolve_event_type(parsed: Mapping, factors: tuple) -> str:
    signals = []
    event_type = None
    for name in EVENT_TYPE_FIELDS:
        value = parsed.get(name)
        if isinstance(value, str):
            signals.append(value)
        event_type = event_type or canonical_event_type(value)

    if event_type is None:
        for name in EVENT_TEXT_FIELDS:
            value = parsed.get(name)
            if not isinstance(value, str):
                continue
            signals.append(value)
            event_type = next(
                (keyword for keyword in EVENT_KEYWORDS if keyword in value.lower()),
                None,
            )
            if event_type:
                break

    return classify_event(factors, event_type or "unknown", " ".join(signals))


def _resolve_summary(parsed: Mapping) -> str:
    for name in SUMMARY_FIELDS:
        value = parsed.get(name)
        if isinstance(value, str):
            return value
        if value is not None:
            return str(value)
    return ""


def normalize_observation(parsed: Mapping | Observation) -> Observation:
    """
    Maps a decoded model response onto the canonical Observation.

    Missing or unusable fields fall back to their defaults instead of failing,
    since each prompt version used its own field names and value ranges.
    Normalizing an Observation (or its to_dict()) again returns the same value.

    Args:
        parsed (dict or Observation): The decoded JSON object.
    Returns:
        Observation: The canonical record with percentages clamped to [0, 100].
    """
    if isinstance(parsed, Observation):
        parsed = parsed.to_dict()
    if not isinstance(parsed, Mapping):
        parsed = {}

    area = _first_number(parsed, AREA_FIELDS)
    area_percent = clamp_percent(area[1]) if area else 0.0

    scales = dict(SEVERITY_FIELDS)
    severity = _first_number(parsed, [name for name, _ in SEVERITY_FIELDS])
    if severity:
        name, rating = severity
        severity_score = clamp_percent(rating * 100 / scales[name])
    else:
        # Area on a 0-5 scale, rescaled to 0-100.
        severity_score = clamp_percent((area_percent / 20) * (100 / 5))

    factors = _resolve_factors(parsed)
    return Observation(
        event_type=_resolve_event_type(parsed, factors),
        factors=factors,
        area_affected_percent=area_percent,
        severity_score=severity_score,
        summary=_resolve_summary(parsed),
    )
