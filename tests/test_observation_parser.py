"""
Tests for extracting the JSON object from raw vision model responses.
"""

import pytest

from observation_parser import ParseError, extract_json_object, strip_code_fences


def test_fenced_response_round_trip():
    raw = '```json\n{"event":"flood","event_area_percent":80,"severity_rating":5,"summary":"x"}\n```'

    assert extract_json_object(raw) == {
        "event": "flood",
        "event_area_percent": 80,
        "severity_rating": 5,
        "summary": "x",
    }


def test_prose_around_object_is_ignored():
    raw = 'Here is my analysis:\n{"event_type": "fire", "summary": "smoke {plume}"}\nHope this helps.'

    assert extract_json_object(raw) == {"event_type": "fire", "summary": "smoke {plume}"}


def test_nested_objects_are_kept():
    raw = '{"event_type": "cyclone", "details": {"eye_visible": true}}'

    assert extract_json_object(raw)["details"] == {"eye_visible": True}


def test_uppercase_fence_marker_is_stripped():
    assert strip_code_fences('```JSON\n{"a": 1}\n```') == '{"a": 1}'


@pytest.mark.parametrize(
    "raw",
    [
        "The image shows a flooded valley.",
        "",
        "} backwards {",
        '{"event_type": "flood", "area_affected_percent": }',
        '{"a": 1} and then {"b": 2}',
        "[{\"a\": 1}]",
    ],
)
def test_unparseable_responses_raise(raw):
    with pytest.raises(ParseError, match="no valid JSON object found"):
        extract_json_object(raw)


def test_non_string_input_raises():
    with pytest.raises(ParseError):
        extract_json_object(None)


def test_parse_error_is_a_value_error():
    assert issubclass(ParseError, ValueError)
