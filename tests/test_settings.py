"""
Unit Tests for settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hotjava.challenges import ChallengeMode
from hotjava.config import GameSettings, get_settings


class TestGameSettings:
    """Test suite for GameSettings."""

    def test_defaults(self, clean_env):
        """Test defaults without any environment."""
        settings = GameSettings()

        assert settings.anthropic_api_key is None
        assert settings.challenge_count == 5
        assert settings.initial_hearts == 5
        assert settings.default_mode is ChallengeMode.FILL_GAPS
        assert settings.fail_delay == 1.0
        assert settings.log_file is None
        assert not settings.use_ai

    def test_prefixed_env(self, clean_env):
        """Test HOTJAVA_* variables are read."""
        clean_env.setenv("HOTJAVA_CHALLENGE_COUNT", "8")
        clean_env.setenv("HOTJAVA_DEFAULT_MODE", "WRITE_FULL")
        clean_env.setenv("HOTJAVA_LOG_FILE", "/tmp/hj.log")

        settings = GameSettings()

        assert settings.challenge_count == 8
        assert settings.default_mode is ChallengeMode.WRITE_FULL
        assert settings.log_file == Path("/tmp/hj.log")

    def test_anthropic_key_enables_ai(self, clean_env):
        """Test the standard Anthropic variable is honoured."""
        clean_env.setenv("ANTHROPIC_API_KEY", "sk-test")

        settings = GameSettings()

        assert settings.anthropic_api_key == "sk-test"
        assert settings.use_ai

    def test_offline_disables_ai(self, clean_env):
        clean_env.setenv("ANTHROPIC_API_KEY", "sk-test")
        clean_env.setenv("HOTJAVA_OFFLINE", "true")

        assert not GameSettings().use_ai

    def test_dotenv_file(self, clean_env, tmp_path):
        """Test a local .env file is read."""
        (tmp_path / ".env").write_text("HOTJAVA_INITIAL_HEARTS=3\n")

        assert GameSettings().initial_hearts == 3

    @pytest.mark.parametrize("count", ["0", "21"])
    def test_challenge_count_bounds(self, clean_env, count):
        clean_env.setenv("HOTJAVA_CHALLENGE_COUNT", count)

        with pytest.raises(ValidationError):
            GameSettings()


class TestGetSettings:
    """Test suite for get_settings."""

    def test_overrides_win(self, clean_env):
        """Test explicit values beat the environment."""
        clean_env.setenv("HOTJAVA_INITIAL_HEARTS", "2")

        assert get_settings(initial_hearts=7).initial_hearts == 7

    def test_none_overrides_ignored(self, clean_env):
        """Test unset options fall through to the environment."""
        clean_env.setenv("HOTJAVA_INITIAL_HEARTS", "2")

        settings = get_settings(initial_hearts=None, offline=None)

        assert settings.initial_hearts == 2
        assert settings.offline is False
