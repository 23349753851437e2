"""Screen shown while challenges are generated."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import LoadingIndicator, Static


class LoadingScreen(Screen):
    """Spinner with the room code; Escape cancels generation."""

    CSS = """
    #loading-content {
        align: center middle;
        height: 100%;
    }

    #loading-content Static {
        width: 100%;
        content-align: center middle;
    }

    LoadingIndicator {
        height: 3;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Esc:Cancel", show=True),
    ]

    def __init__(self, room_code: str, hosting: bool = True, **kwargs) -> None:
        super().__init__(**kwargs)
        self.room_code = room_code
        self.hosting = hosting

    def compose(self) -> ComposeResult:
        """Compose the loading screen."""
        with Container(id="loading-content"):
            yield LoadingIndicator()
            yield Static(
                "Brewing fresh challenges..." if self.hosting else "Syncing with host...",
                classes="title",
            )
            yield Static(f"Using code: {self.room_code}", classes="hint", markup=False)

    def action_cancel(self) -> None:
        """Abandon the pending generation request."""
        self.app.cancel_generation()
