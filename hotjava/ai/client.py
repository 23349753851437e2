"""Claude API client wrapper."""

import json
import logging
import os
import re
from typing import Optional

from anthropic import APIError, AsyncAnthropic

from ..challenges.source import GenerationError
from ..challenges.types import GAP_MARKER

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"

_JSON_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


def extract_json(response: str):
    """Parse JSON from a model response, unwrapping a markdown code block.

    Raises:
        json.JSONDecodeError: If no valid JSON is found
    """
    json_match = _JSON_BLOCK.search(response)
    if json_match:
        response = json_match.group(1)
    return json.loads(response)


class ClaudeClient:
    """Wrapper for Claude API interactions."""

    def __init__(self, api_key: Optional[str] = None, model: str = DEFAULT_MODEL):
        """Initialize the Claude client.

        Args:
            api_key: Anthropic API key. If not provided, uses ANTHROPIC_API_KEY env var.
            model: Model name to request
        """
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise ValueError(
                "Anthropic API key required. Set ANTHROPIC_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.client = AsyncAnthropic(api_key=self.api_key)
        self.model = model

    async def complete(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 1.0,
    ) -> str:
        """Get a completion from Claude.

        Args:
            prompt: The user prompt
            system: Optional system prompt
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature

        Returns:
            Claude's response text
        """
        messages = [{"role": "user", "content": prompt}]

        response = await self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=temperature,
            system=system or "",
            messages=messages,
        )

        return "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )

    async def generate_challenges(self, topic: str, count: int, seed: int) -> dict:
        """Generate a batch of coding challenges.

        Claude has no seed parameter, so the seed goes into the prompt and
        sampling runs at temperature 0. Equal inputs usually, but not
        always, produce equal challenges.

        Args:
            topic: What the challenges should cover
            count: Number of challenges to ask for
            seed: Room seed shared by every player

        Returns:
            Parsed JSON object with a "challenges" list

        Raises:
            GenerationError: If the API fails or returns unusable JSON
        """
        # Normalize topic for better consistency with seeds
        normalized_topic = topic.strip().lower()

        system = f"""You are HOTJAVA, a fun, energetic, and slightly spicy coding tutor inspired by gamified language learning apps.
Your goal is to create engaging coding challenges for a user based on a specific topic.

You must generate {count} distinct challenges. For each challenge, provide:
1. question: a short, punchy question/instruction
2. description: a brief description or context
3. code_with_gaps: a code snippet with EXACTLY ONE or TWO gaps written as "{GAP_MARKER}"
4. full_solution: the full, correct solution code
5. gap_answers: the strings that fill the gaps, in order
6. explanation: a fun, encouraging explanation of the solution

Keep the code snippets under 10 lines.
Ensure gap_answers exactly match the missing parts of code_with_gaps.

Respond with JSON only: {{"challenges": [{{"question": ..., "description": ..., "code_with_gaps": ..., "full_solution": ..., "gap_answers": [...], "explanation": ...}}]}}"""

        prompt = f"""Generate {count} coding challenges about "{normalized_topic}".
Variation seed: {seed}. The same topic and seed must always produce the same challenges.
Respond in JSON format."""

        try:
            response = await self.complete(prompt, system=system, max_tokens=4096, temperature=0.0)
        except APIError as e:
            logger.error("Claude API error: %s", e)
            raise GenerationError(f"Challenge provider unavailable: {e}") from e

        if not response.strip():
            raise GenerationError("No content generated")

        try:
            data = extract_json(response)
        except json.JSONDecodeError as e:
            logger.warning("Could not decode challenge JSON: %s", e)
            raise GenerationError("Challenge provider returned malformed JSON") from e

        if not isinstance(data, dict):
            raise GenerationError("Challenge provider returned an unexpected payload")
        return data
