"""Answer checking for both challenge modes."""

import re
from collections.abc import Sequence
from typing import Optional, Union

from .types import Challenge, ChallengeMode

Submission = Union[str, Sequence[Optional[str]], None]

_WHITESPACE = re.compile(r"\s+")


def normalize_gap(text: Optional[str]) -> str:
    """Trim and case-fold a single gap answer."""
    return (text or "").strip().casefold()


def normalize_code(text: Optional[str]) -> str:
    """Collapse every whitespace run to one space and trim."""
    return _WHITESPACE.sub(" ", text or "").strip()


def _gap_entries(submission: Submission) -> list[str]:
    if submission is None:
        return []
    if isinstance(submission, str):
        return [submission]
    return [entry or "" for entry in submission]


def _full_text(submission: Submission) -> str:
    if submission is None:
        return ""
    if isinstance(submission, str):
        return submission
    return "\n".join(entry or "" for entry in submission)


def validate(challenge: Challenge, mode: ChallengeMode, submission: Submission) -> bool:
    """Check a submission against a challenge.

    FILL_GAPS compares each gap after trimming and case-folding; missing
    entries count as empty. Challenges whose marker count does not match
    their expected answers cannot be answered and are always wrong.

    WRITE_FULL compares the whole solution with whitespace runs collapsed,
    so formatting is ignored but content, casing and punctuation are not.

    Args:
        challenge: The challenge being answered
        mode: Answer mode of the session
        submission: Per-gap strings (FILL_GAPS) or free text (WRITE_FULL)

    Returns:
        True if the answer is correct
    """
    if ChallengeMode(mode) is ChallengeMode.WRITE_FULL:
        return normalize_code(_full_text(submission)) == normalize_code(challenge.full_solution)

    if not challenge.is_well_formed:
        return False

    entries = _gap_entries(submission)
    for i, expected in enumerate(challenge.expected_gaps):
        given = entries[i] if i < len(entries) else ""
        if normalize_gap(given) != normalize_gap(expected):
            return False
    return True
