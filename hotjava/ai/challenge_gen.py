"""Challenge generation using AI."""

import logging
import time
from typing import Optional

from ..challenges.source import GenerationError
from ..challenges.templates import pick_templates
from ..challenges.types import Challenge
from .client import ClaudeClient

logger = logging.getLogger(__name__)


class ChallengeGenerator:
    """Generates coding challenges for a session."""

    def __init__(self, client: Optional[ClaudeClient] = None):
        """Initialize the generator.

        Args:
            client: ClaudeClient for AI generation. If not provided,
                   uses the curated challenge templates.
        """
        self.client = client

    async def generate(self, topic: str, count: int, seed: int) -> list[Challenge]:
        """Generate challenges about a topic.

        Args:
            topic: Display topic, e.g. "Python Loops"
            count: Number of challenges wanted
            seed: Room seed for reproducible sets

        Returns:
            Up to ``count`` challenges, possibly fewer

        Raises:
            GenerationError: If nothing usable could be produced
        """
        if self.client:
            data = await self.client.generate_challenges(topic, count, seed)
            items = data.get("challenges")
        else:
            # Fallback to template-based generation
            items = pick_templates(topic, count, seed)

        if not isinstance(items, list):
            raise GenerationError("Response has no challenge list")

        challenges = self._to_challenges(items, topic)
        if not challenges:
            raise GenerationError(f"No usable challenges for {topic!r}")

        logger.info("Generated %d challenges for %r", len(challenges[:count]), topic)
        return challenges[:count]

    def _to_challenges(self, items: list, topic: str) -> list[Challenge]:
        """Convert raw items, skipping anything malformed."""
        stamp = int(time.time() * 1000)
        challenges = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object challenge item %d", index)
                continue
            try:
                challenge = Challenge.from_dict(
                    item, topic=topic, challenge_id=f"challenge-{stamp}-{index}"
                )
            except ValueError as e:
                logger.warning("Skipping malformed challenge %d: %s", index, e)
                continue
            if not challenge.is_well_formed:
                logger.warning(
                    "Challenge %s has %d gaps but %d answers",
                    challenge.id,
                    challenge.gap_count,
                    len(challenge.expected_gaps),
                )
            challenges.append(challenge)
        return challenges
