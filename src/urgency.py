# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from dataclasses import dataclass
from typing import Literal

from normalizer import Observation

Urgency = Literal["LOW", "MEDIUM", "HIGH", "CRITICAL"]
URGENCY_LEVELS = ("LOW", "MEDIUM", "HIGH", "CRITICAL")


@dataclass(frozen=True)
class UrgencyBands:
    critical_score: float = 90
    critical_area: float = 70
    high_score: float = 70
    high_area: float = 50
    medium_score: float = 40
    medium_area: float = 30


DEFAULT_BANDS = UrgencyBands()


def resolve_urgency(observation: Observation, bands: UrgencyBands = DEFAULT_BANDS) -> Urgency:
    """
    Maps severity score and affected area to an urgency tier, evaluated top-down.
    Non-satellite observations carry no operational urgency and are always LOW.
    """
    if observation.event_type == "non_satellite":
        return "LOW"

    score = observation.severity_score
    area = observation.area_affected_percent
    if score >= bands.critical_score or area >= bands.critical_area:
        return "CRITICAL"
    if score >= bands.high_score or area >= bands.high_area:
        return "HIGH"
    if score >= bands.medium_score or area >= bands.medium_area:
        return "MEDIUM"
    return "LOW"
