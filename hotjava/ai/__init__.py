"""AI module for Claude-powered challenge generation."""

from .challenge_gen import ChallengeGenerator
from .client import ClaudeClient

__all__ = ["ChallengeGenerator", "ClaudeClient"]
