"""Shared fixtures for the hotjava test suite."""

import pytest

from hotjava.challenges import Challenge


def make_challenge(
    index: int = 0,
    code_with_gaps: str = "__GAP__ i in range(3):\n    print(i)",
    expected_gaps: tuple = ("for",),
    full_solution: str = "for i in range(3):\n    print(i)",
) -> Challenge:
    """Build a small challenge with sensible defaults."""
    return Challenge(
        id=f"challenge-test-{index}",
        topic="Python Loops",
        question=f"Question {index}",
        code_with_gaps=code_with_gaps,
        full_solution=full_solution,
        expected_gaps=expected_gaps,
        explanation="Loops repeat things.",
    )


@pytest.fixture
def challenge():
    """A one-gap challenge."""
    return make_challenge()


@pytest.fixture
def two_gap_challenge():
    """A challenge with two gaps."""
    return make_challenge(
        code_with_gaps="__GAP__ double(x):\n    __GAP__ x * 2",
        expected_gaps=("def", "return"),
        full_solution="def double(x):\n    return x * 2",
    )


@pytest.fixture
def five_challenges():
    """Five well-formed challenges."""
    return [make_challenge(i) for i in range(5)]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without API keys, HOTJAVA_* variables or a local .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    for name in [
        "ANTHROPIC_API_KEY",
        "MODEL",
        "CHALLENGE_COUNT",
        "INITIAL_HEARTS",
        "DEFAULT_MODE",
        "FAIL_DELAY",
        "OFFLINE",
        "LOG_LEVEL",
        "LOG_FILE",
    ]:
        monkeypatch.delenv(f"HOTJAVA_{name}", raising=False)
    return monkeypatch
