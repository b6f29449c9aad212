"""
Tests for the decision record and its flattened log line.
"""

from assembler import LOG_HEADER, Decision, assemble_decision, to_log_line
from normalizer import Observation


def _decision(**overrides):
    values = dict(
        event_type="fire",
        urgency="CRITICAL",
        verdict="WORTH_RESEARCH",
        severity_percent=75,
        severity_score=90,
        factors=("smoke plume",),
        summary="Active fire front",
    )
    values.update(overrides)
    return Decision(**values)


def test_assemble_rounds_and_passes_through():
    observation = Observation(
        event_type="flood",
        factors=("Flood Risk",),
        area_affected_percent=44.6,
        severity_score=65.2,
        summary="Water over fields",
    )

    decision = assemble_decision(observation, "MEDIUM", "WORTH_RESEARCH")

    assert decision == Decision(
        event_type="flood",
        urgency="MEDIUM",
        verdict="WORTH_RESEARCH",
        severity_percent=45,
        severity_score=65,
        factors=("Flood Risk",),
        summary="Water over fields",
    )


def test_to_dict():
    assert _decision().to_dict() == {
        "eventType": "fire",
        "urgency": "CRITICAL",
        "verdict": "WORTH_RESEARCH",
        "severityPercent": 75,
        "severityScore": 90,
        "factors": ["smoke plume"],
        "summary": "Active fire front",
    }


def test_log_line_matches_header():
    line = to_log_line(_decision(), "scene.png")

    assert line == "scene.png,fire,75,4.5,WORTH_RESEARCH,Active fire front"
    assert len(line.split(",")) == len(LOG_HEADER.split(","))


def test_log_line_strips_commas_and_newlines():
    decision = _decision(summary="Smoke, visible\nnear the river,\r\nspreading")

    line = to_log_line(decision, "tile,3.png")

    assert line == "tile 3.png,fire,75,4.5,WORTH_RESEARCH,Smoke visible near the river spreading"
    assert "\n" not in line


def test_log_line_truncates_summary():
    line = to_log_line(_decision(summary="x" * 500), "scene.png")
    assert line.endswith("," + "x" * 200)

    line = to_log_line(_decision(summary="x" * 500), "scene.png", max_summary_length=10)
    assert line.endswith("," + "x" * 10)


def test_halves_round_up():
    observation = Observation(event_type="fire", area_affected_percent=42.5, severity_score=62.5)

    decision = assemble_decision(observation, "MEDIUM", "WORTH_RESEARCH")

    assert decision.severity_percent == 43
    assert decision.severity_score == 63


def test_log_line_severity_rating_rounds_half_up():
    line = to_log_line(_decision(severity_score=95), "scene.png")
    assert line.split(",")[3] == "4.8"
