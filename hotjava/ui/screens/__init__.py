"""UI Screens."""

from .game import GameScreen
from .landing import LandingScreen
from .loading import LoadingScreen
from .result import ResultScreen

__all__ = ["GameScreen", "LandingScreen", "LoadingScreen", "ResultScreen"]
