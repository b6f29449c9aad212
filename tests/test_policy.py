"""
Tests for the research verdict policy.
"""

from normalizer import Observation
from policy import PolicyThresholds, decide_verdict
from urgency import resolve_urgency


def _decide(event_type="flood", area=0, score=0, urgency=None):
    observation = Observation(event_type=event_type, area_affected_percent=area, severity_score=score)
    return decide_verdict(observation, urgency or resolve_urgency(observation))


def test_critical_fire_is_worth_research():
    observation = Observation(event_type="fire", area_affected_percent=75, severity_score=95)
    urgency = resolve_urgency(observation)

    assert urgency == "CRITICAL"
    assert decide_verdict(observation, urgency) == "WORTH_RESEARCH"


def test_weak_unknown_observation_is_not_worth_research():
    observation = Observation(event_type="unknown", area_affected_percent=5, severity_score=10)
    urgency = resolve_urgency(observation)

    assert urgency == "LOW"
    assert decide_verdict(observation, urgency) == "NOT_WORTH_RESEARCH"


def test_non_satellite_is_rejected_even_when_critical():
    assert _decide("non_satellite", area=90, score=100, urgency="CRITICAL") == "NOT_WORTH_RESEARCH"


def test_high_score_or_area_is_worth_research():
    assert _decide("unknown", score=60, urgency="LOW") == "WORTH_RESEARCH"
    assert _decide("unknown", area=50, urgency="LOW") == "WORTH_RESEARCH"


def test_medium_urgency_is_worth_research():
    assert _decide("erosion", area=30, score=10) == "WORTH_RESEARCH"


def test_low_urgency_classified_event_is_not_worth_research():
    assert _decide("drought", area=25, score=30) == "NOT_WORTH_RESEARCH"


def test_weak_unknown_overrides_medium_urgency():
    assert _decide("unknown", area=10, score=10, urgency="MEDIUM") == "NOT_WORTH_RESEARCH"


def test_weak_classified_event_follows_urgency():
    assert _decide("flood", area=10, score=10, urgency="MEDIUM") == "WORTH_RESEARCH"


def test_custom_thresholds():
    thresholds = PolicyThresholds(research_score=30)
    observation = Observation(event_type="fire", area_affected_percent=0, severity_score=35)

    assert decide_verdict(observation, "LOW", thresholds) == "WORTH_RESEARCH"
