"""Custom widgets."""

from .stats_bar import StatsBar

__all__ = ["StatsBar"]
