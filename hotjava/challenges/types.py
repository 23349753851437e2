"""Challenge type definitions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

GAP_MARKER = "__GAP__"


class ChallengeMode(str, Enum):
    """How the player answers a challenge."""

    FILL_GAPS = "FILL_GAPS"
    WRITE_FULL = "WRITE_FULL"


class Challenge(BaseModel):
    """A single coding challenge."""

    model_config = ConfigDict(frozen=True)

    id: str
    topic: str = Field(description="Display topic, informational only")
    question: str
    description: str = Field(default="")
    code_with_gaps: str = Field(description=f"Code containing {GAP_MARKER} placeholders")
    full_solution: str
    expected_gaps: tuple[str, ...] = Field(
        default=(), description="Correct text for each gap, left to right"
    )
    explanation: str = Field(default="")

    @property
    def gap_count(self) -> int:
        """Number of gap markers in the code."""
        return self.code_with_gaps.count(GAP_MARKER)

    @property
    def is_well_formed(self) -> bool:
        """Check that every gap marker has exactly one expected answer."""
        return self.gap_count == len(self.expected_gaps)

    def code_segments(self) -> list[str]:
        """Split the code around its gaps.

        Returns:
            ``gap_count + 1`` code fragments; gap ``i`` sits between
            fragment ``i`` and fragment ``i + 1``.
        """
        return self.code_with_gaps.split(GAP_MARKER)

    @classmethod
    def from_dict(cls, data: dict, topic: str, challenge_id: str) -> "Challenge":
        """Create a Challenge from the generator wire format.

        Args:
            data: Raw item with question, description, code_with_gaps,
                full_solution, gap_answers and explanation keys
            topic: Display topic to attach
            challenge_id: Fresh identifier for this challenge

        Raises:
            ValueError: If required fields are missing or mistyped
        """
        gap_answers = data.get("gap_answers", [])
        if not isinstance(gap_answers, list):
            raise ValueError("gap_answers must be a list")

        return cls(
            id=challenge_id,
            topic=topic,
            question=data.get("question"),
            description=data.get("description") or "",
            code_with_gaps=data.get("code_with_gaps"),
            full_solution=data.get("full_solution"),
            expected_gaps=tuple(gap_answers),
            explanation=data.get("explanation") or "",
        )
