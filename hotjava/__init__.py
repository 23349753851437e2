"""HOTJAVA: a gamified coding quiz in the terminal."""

__version__ = "0.1.0"
