"""
Unit Tests for the Challenge model.
"""

import pytest
from pydantic import ValidationError

from hotjava.challenges import GAP_MARKER, Challenge, ChallengeMode


WIRE_ITEM = {
    "question": "Define a function",
    "description": "Double the argument.",
    "code_with_gaps": "__GAP__ double(x):\n    __GAP__ x * 2",
    "full_solution": "def double(x):\n    return x * 2",
    "gap_answers": ["def", "return"],
    "explanation": "def declares, return returns.",
}


class TestChallenge:
    """Test suite for Challenge."""

    def test_from_dict(self):
        """Test building a challenge from the wire format."""
        challenge = Challenge.from_dict(WIRE_ITEM, topic="Python", challenge_id="challenge-1-0")

        assert challenge.id == "challenge-1-0"
        assert challenge.topic == "Python"
        assert challenge.expected_gaps == ("def", "return")
        assert challenge.gap_count == 2
        assert challenge.is_well_formed

    def test_from_dict_optional_fields_default(self):
        """Test that description and explanation may be missing."""
        item = {k: v for k, v in WIRE_ITEM.items() if k not in ("description", "explanation")}
        challenge = Challenge.from_dict(item, topic="Python", challenge_id="c")

        assert challenge.description == ""
        assert challenge.explanation == ""

    def test_from_dict_missing_required_field(self):
        """Test that a missing solution is rejected."""
        item = dict(WIRE_ITEM)
        del item["full_solution"]

        with pytest.raises(ValidationError):
            Challenge.from_dict(item, topic="Python", challenge_id="c")

    def test_from_dict_gap_answers_not_a_list(self):
        """Test that gap_answers must be a list."""
        item = dict(WIRE_ITEM, gap_answers="def")

        with pytest.raises(ValueError, match="gap_answers"):
            Challenge.from_dict(item, topic="Python", challenge_id="c")

    def test_mismatched_gaps_not_well_formed(self):
        """Test detection of a marker/answer count mismatch."""
        item = dict(WIRE_ITEM, gap_answers=["def"])
        challenge = Challenge.from_dict(item, topic="Python", challenge_id="c")

        assert challenge.gap_count == 2
        assert not challenge.is_well_formed

    def test_code_segments(self):
        """Test splitting code around its gaps."""
        challenge = Challenge.from_dict(WIRE_ITEM, topic="Python", challenge_id="c")

        assert challenge.code_segments() == ["", " double(x):\n    ", " x * 2"]

    def test_no_gaps(self):
        """Test a challenge without any gap markers."""
        challenge = Challenge(
            id="c",
            topic="SQL",
            question="q",
            code_with_gaps="SELECT 1;",
            full_solution="SELECT 1;",
        )

        assert challenge.gap_count == 0
        assert challenge.is_well_formed
        assert GAP_MARKER not in challenge.code_with_gaps

    def test_frozen(self):
        """Test that challenges cannot be mutated."""
        challenge = Challenge.from_dict(WIRE_ITEM, topic="Python", challenge_id="c")

        with pytest.raises(ValidationError):
            challenge.question = "changed"


class TestChallengeMode:
    """Test suite for ChallengeMode."""

    def test_from_value(self):
        """Test lookup by string value."""
        assert ChallengeMode("FILL_GAPS") is ChallengeMode.FILL_GAPS
        assert ChallengeMode("WRITE_FULL") is ChallengeMode.WRITE_FULL
