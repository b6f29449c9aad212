# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

from dataclasses import dataclass
from typing import Literal

from normalizer import Observation
from urgency import Urgency

Verdict = Literal["WORTH_RESEARCH", "NOT_WORTH_RESEARCH"]
VERDICTS = ("WORTH_RESEARCH", "NOT_WORTH_RESEARCH")


@dataclass(frozen=True)
class PolicyThresholds:
    research_score: float = 60
    research_area: float = 50
    negligible_score: float = 20
    negligible_area: float = 20


DEFAULT_THRESHOLDS = PolicyThresholds()


def decide_verdict(
    observation: Observation,
    urgency: Urgency,
    thresholds: PolicyThresholds = DEFAULT_THRESHOLDS,
) -> Verdict:
    """
    Decides whether an observation is worth further research.

    Rules are evaluated top-down and the first one that applies decides:
    1. non-satellite images are rejected;
    2. CRITICAL urgency is always worth research;
    3. a high severity score or a large affected area is worth research;
    4. a weak, unclassified observation is not;
    5. otherwise HIGH and MEDIUM urgency are worth research, LOW is not.

    Args:
        observation (Observation): The normalized observation.
        urgency (str): The urgency resolved for the observation.
        thresholds (PolicyThresholds): Score and area thresholds for rules 3 and 4.
    Returns:
        str: WORTH_RESEARCH or NOT_WORTH_RESEARCH.
    """
    score = observation.severity_score
    area = observation.area_affected_percent

    if observation.event_type == "non_satellite":
        return "NOT_WORTH_RESEARCH"
    if urgency == "CRITICAL":
        return "WORTH_RESEARCH"
    if score >= thresholds.research_score or area >= thresholds.research_area:
        return "WORTH_RESEARCH"
    if (
        score < thresholds.negligible_score
        and area < thresholds.negligible_area
        and observation.event_type == "unknown"
    ):
        return "NOT_WORTH_RESEARCH"
    if urgency in ("HIGH", "MEDIUM"):
        return "WORTH_RESEARCH"
    return "NOT_WORTH_RESEARCH"
