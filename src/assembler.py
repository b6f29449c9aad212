# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import math
from dataclasses import dataclass, field

from normalizer import Observation

MAX_SUMMARY_LENGTH = 200
LOG_HEADER = "filename,event,event_area_percent,severity_rating,verdict,summary"


@dataclass(frozen=True)
class Decision:
    event_type: str
    urgency: str
    verdict: str
    severity_percent: int
    severity_score: int
    factors: tuple = field(default_factory=tuple)
    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "eventType": self.event_type,
            "urgency": self.urgency,
            "verdict": self.verdict,
            "severityPercent": self.severity_percent,
            "severityScore": self.severity_score,
            "factors": list(self.factors),
            "summary": self.summary,
        }


def round_half_up(value: float) -> int:
    # Percentages are non-negative, so halves always round up (42.5 -> 43).
    return math.floor(value + 0.5)


def assemble_decision(observation: Observation, urgency: str, verdict: str) -> Decision:
    return Decision(
        event_type=observation.event_type,
        urgency=urgency,
        verdict=verdict,
        severity_percent=round_half_up(observation.area_affected_percent),
        severity_score=round_half_up(observation.severity_score),
        factors=observation.factors,
        summary=observation.summary,
    )


def _flatten(text: str) -> str:
    return " ".join(text.replace(",", " ").split())


def to_log_line(decision: Decision, filename: str, max_summary_length: int = MAX_SUMMARY_LENGTH) -> str:
    """
    Renders a decision as one line matching LOG_HEADER.

    The summary loses its commas and line breaks and is cut to max_summary_length
    characters, and the severity is written on the 1-5 severity_rating scale.
    """
    severity_rating = round_half_up(decision.severity_score / 2) / 10
    return ",".join(
        [
            _flatten(filename),
            decision.event_type,
            str(decision.severity_percent),
            str(severity_rating),
            decision.verdict,
            _flatten(decision.summary)[:max_summary_length],
        ]
    )
