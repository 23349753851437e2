"""Configuration management."""

from .settings import GameSettings, get_settings

__all__ = ["GameSettings", "get_settings"]
