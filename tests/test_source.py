"""
Unit Tests for starting a session from a challenge source.
"""

import pytest

from hotjava.challenges import (
    ChallengeMode,
    GenerationError,
    SessionState,
    derive_seed,
    start_session,
)

from conftest import make_challenge


class FakeSource:
    """Challenge source returning a fixed list and recording calls."""

    def __init__(self, challenges=None, error=None):
        self.challenges = challenges or []
        self.error = error
        self.calls = []

    async def generate(self, topic, count, seed):
        self.calls.append((topic, count, seed))
        if self.error:
            raise self.error
        return list(self.challenges)


class TestStartSession:
    """Test suite for start_session."""

    @pytest.mark.asyncio
    async def test_requests_once_with_room_seed(self):
        """Test the source is asked once with the normalized room seed."""
        source = FakeSource([make_challenge(i) for i in range(3)])

        session = await start_session(source, "Python Loops", " abcde ", ChallengeMode.FILL_GAPS, count=3)

        assert source.calls == [("Python Loops", 3, derive_seed("ABCDE"))]
        assert session.state is SessionState.ACTIVE
        assert len(session.challenges) == 3

    @pytest.mark.asyncio
    async def test_accepts_short_list(self):
        """Test fewer challenges than requested still start a session."""
        source = FakeSource([make_challenge(0), make_challenge(1)])

        session = await start_session(source, "Python", "ROOM1", ChallengeMode.FILL_GAPS, count=5)

        assert len(session.challenges) == 2

    @pytest.mark.asyncio
    async def test_passes_mode_and_hearts(self):
        """Test mode and hearts reach the session."""
        source = FakeSource([make_challenge(0)])

        session = await start_session(
            source, "Python", "ROOM1", ChallengeMode.WRITE_FULL, initial_hearts=2
        )

        assert session.mode is ChallengeMode.WRITE_FULL
        assert session.hearts == 2

    @pytest.mark.asyncio
    async def test_empty_list_is_finished_session(self):
        """Test an empty list yields a FINISHED session, not an error."""
        session = await start_session(FakeSource([]), "Python", "ROOM1", ChallengeMode.FILL_GAPS)

        assert session.state is SessionState.FINISHED

    @pytest.mark.asyncio
    async def test_generation_error_propagates(self):
        """Test provider failures reach the caller unchanged."""
        error = GenerationError("provider down")
        source = FakeSource(error=error)

        with pytest.raises(GenerationError) as exc_info:
            await start_session(source, "Python", "ROOM1", ChallengeMode.FILL_GAPS)
        assert exc_info.value is error

    @pytest.mark.asyncio
    @pytest.mark.parametrize("topic, code", [("", "ROOM1"), ("   ", "ROOM1"), ("Python", "  ")])
    async def test_blank_inputs_rejected(self, topic, code):
        """Test blank topic or code fail before the source is called."""
        source = FakeSource([make_challenge(0)])

        with pytest.raises(ValueError):
            await start_session(source, topic, code, ChallengeMode.FILL_GAPS)
        assert source.calls == []
