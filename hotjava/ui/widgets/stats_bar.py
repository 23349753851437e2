"""Widget showing hearts, XP, streak and progress for a session."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Label, ProgressBar

from ...challenges import ChallengeSession


class StatsBar(Widget):
    """Header strip for the game screen."""

    DEFAULT_CSS = """
    StatsBar {
        height: auto;
        padding: 0 2;
        border-bottom: solid $primary;
        background: $surface-darken-1;
    }

    StatsBar Horizontal {
        height: auto;
    }

    StatsBar .stat {
        margin-right: 3;
        text-style: bold;
    }

    StatsBar .hearts {
        color: $error;
    }

    StatsBar .xp {
        color: $warning;
    }

    StatsBar .streak {
        color: $success;
    }

    StatsBar .room {
        color: $text-muted;
    }

    StatsBar ProgressBar {
        width: 1fr;
        margin-right: 3;
    }
    """

    def __init__(self, room_code: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.room_code = room_code

    def compose(self) -> ComposeResult:
        """Compose the bar."""
        with Horizontal():
            yield ProgressBar(total=100, show_eta=False, show_percentage=False, id="session-progress")
            yield Label("", id="stat-hearts", classes="stat hearts")
            yield Label("", id="stat-xp", classes="stat xp")
            yield Label("", id="stat-streak", classes="stat streak")
            yield Label(f"Room: {self.room_code}", classes="stat room")

    def refresh_stats(self, session: ChallengeSession) -> None:
        """Redraw the numbers from a session."""
        self.query_one("#session-progress", ProgressBar).update(progress=session.progress * 100)
        self.query_one("#stat-hearts", Label).update(f"Hearts {session.hearts}/{session.initial_hearts}")
        self.query_one("#stat-xp", Label).update(f"XP {session.xp}")
        self.query_one("#stat-streak", Label).update(f"Streak {session.streak}")
