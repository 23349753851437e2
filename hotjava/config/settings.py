"""Application settings loaded from the environment."""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..ai.client import DEFAULT_MODEL
from ..challenges.engine import DEFAULT_HEARTS
from ..challenges.source import DEFAULT_CHALLENGE_COUNT
from ..challenges.types import ChallengeMode


class GameSettings(BaseSettings):
    """Settings for a hotjava run.

    Every field can be set as ``HOTJAVA_<FIELD>`` in the environment or a
    local ``.env`` file. The API key is also read from ``ANTHROPIC_API_KEY``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOTJAVA_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    anthropic_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("HOTJAVA_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY"),
    )
    model: str = Field(default=DEFAULT_MODEL, description="Claude model for generation")
    challenge_count: int = Field(default=DEFAULT_CHALLENGE_COUNT, ge=1, le=20)
    initial_hearts: int = Field(default=DEFAULT_HEARTS, description="Starting health")
    default_mode: ChallengeMode = Field(default=ChallengeMode.FILL_GAPS)
    fail_delay: float = Field(default=1.0, ge=0, description="Seconds before showing a loss")
    offline: bool = Field(default=False, description="Use curated challenges only")
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    @property
    def use_ai(self) -> bool:
        """Check whether challenges should come from Claude."""
        return not self.offline and bool(self.anthropic_api_key)


def get_settings(**overrides) -> GameSettings:
    """Load settings, letting explicit overrides win over the environment.

    ``None`` overrides are ignored so unset CLI flags fall through.
    """
    return GameSettings(**{key: value for key, value in overrides.items() if value is not None})
