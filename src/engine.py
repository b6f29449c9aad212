# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import logging

from assembler import Decision, assemble_decision
from normalizer import normalize_observation
from observation_parser import extract_json_object
from policy import DEFAULT_THRESHOLDS, PolicyThresholds, decide_verdict
from urgency import DEFAULT_BANDS, UrgencyBands, resolve_urgency


def analyze_text(
    raw_text: str,
    bands: UrgencyBands = DEFAULT_BANDS,
    thresholds: PolicyThresholds = DEFAULT_THRESHOLDS,
) -> Decision:
    """
    Turns a raw vision model response into a Decision.

    Args:
        raw_text (str): The verbatim model response for one image.
        bands (UrgencyBands): Urgency band thresholds.
        thresholds (PolicyThresholds): Research verdict thresholds.
    Returns:
        Decision: The canonical decision record.
    Raises:
        ParseError: If the response holds no valid JSON object.
    """
    parsed = extract_json_object(raw_text)
    observation = normalize_observation(parsed)
    urgency = resolve_urgency(observation, bands)
    verdict = decide_verdict(observation, urgency, thresholds)
    logging.info(
        f"Classified observation as {observation.event_type} "
        f"(urgency={urgency}, verdict={verdict})."
    )
    return assemble_decision(observation, urgency, verdict)


class DecisionEngine:
    """Holds configured thresholds; keeps no state between calls."""

    def __init__(
        self,
        bands: UrgencyBands = DEFAULT_BANDS,
        thresholds: PolicyThresholds = DEFAULT_THRESHOLDS,
    ):
        self.bands = bands
        self.thresholds = thresholds

    def analyze(self, raw_text: str) -> Decision:
        return analyze_text(raw_text, self.bands, self.thresholds)
