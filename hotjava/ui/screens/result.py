"""Screen summarizing a finished session."""

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Button, Static

from ...challenges import SessionState, SessionSummary


class ResultScreen(Screen):
    """Final XP and stats for a session."""

    CSS = """
    #result-stats {
        height: auto;
        margin: 1 0;
        padding: 1 2;
        border: solid $warning;
        background: $surface-darken-1;
    }

    #result-xp {
        color: $warning;
        text-style: bold;
    }

    #btn-continue {
        width: 100%;
    }
    """

    def __init__(self, summary: SessionSummary, room_code: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.summary = summary
        self.room_code = room_code

    def compose(self) -> ComposeResult:
        """Compose the result screen."""
        finished = self.summary.outcome is SessionState.FINISHED
        with Container(id="main-content"):
            yield Static("Lesson Complete!" if finished else "Out of hearts!", classes="title")
            with Vertical(id="result-stats"):
                yield Static(f"Total XP: {self.summary.xp}", id="result-xp")
                yield Static(f"Room: {self.room_code}", markup=False)
                yield Static(f"Correct: {self.summary.correct}/{self.summary.total}")
                yield Static(f"Best streak: {self.summary.best_streak}")
                yield Static(f"Hearts left: {self.summary.hearts_left}")
            yield Button("Continue", id="btn-continue", variant="warning")

    def on_mount(self) -> None:
        """Focus the continue button."""
        self.query_one("#btn-continue", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-continue":
            self.app.back_to_landing()
