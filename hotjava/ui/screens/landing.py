"""Landing screen for hosting or joining a room."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, Label, RadioButton, RadioSet, Static

from ...challenges import ChallengeMode, generate_room_code, normalize_room_code


class LandingScreen(Screen):
    """Pick a topic, a room code and a mode, then start."""

    CSS = """
    #session-type {
        height: auto;
        margin-bottom: 1;
    }

    #session-type Button {
        width: 1fr;
        margin-right: 1;
    }

    #session-type Button.-active {
        background: $warning;
    }

    #form {
        height: auto;
        padding: 1 2;
        border: solid $primary;
        background: $surface-darken-1;
    }

    #form Label {
        margin-top: 1;
        color: $text-muted;
        text-style: bold;
    }

    #mode {
        width: 100%;
    }

    #error {
        margin: 1 0;
        color: $error;
        text-style: bold;
    }

    #btn-start {
        width: 100%;
        margin-top: 1;
    }
    """

    def __init__(
        self,
        topic: str = "",
        room_code: str = "",
        hosting: bool = True,
        mode: ChallengeMode = ChallengeMode.FILL_GAPS,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.hosting = hosting
        self._initial_topic = topic
        self._initial_code = normalize_room_code(room_code) or (generate_room_code() if hosting else "")
        self._initial_mode = ChallengeMode(mode)

    def compose(self) -> ComposeResult:
        """Compose the landing screen."""
        with Container(id="main-content"):
            yield Static("HOTJAVA", classes="title")
            yield Static("Brew your code skills.", classes="subtitle")

            with Horizontal(id="session-type"):
                yield Button("Create", id="btn-host")
                yield Button("Join", id="btn-join")

            with Vertical(id="form"):
                yield Label("", id="topic-label")
                yield Input(value=self._initial_topic, id="topic")
                yield Label("", id="code-label")
                yield Input(value=self._initial_code, placeholder="CODE", id="room-code")
                yield Static("", id="code-hint", classes="hint")
                yield Label("Challenge Mode")
                with RadioSet(id="mode"):
                    yield RadioButton(
                        "Fill Gaps",
                        value=self._initial_mode is ChallengeMode.FILL_GAPS,
                        id="mode-fill",
                    )
                    yield RadioButton(
                        "Write Code",
                        value=self._initial_mode is ChallengeMode.WRITE_FULL,
                        id="mode-write",
                    )
                yield Static("", id="error", markup=False)
                yield Button("Start Session", id="btn-start", variant="warning")

    def on_mount(self) -> None:
        """Apply host/join labels and button state."""
        self._apply_session_type()
        self.query_one("#topic", Input).focus()

    @property
    def topic(self) -> str:
        return self.query_one("#topic", Input).value

    @property
    def room_code(self) -> str:
        return normalize_room_code(self.query_one("#room-code", Input).value)

    @property
    def mode(self) -> ChallengeMode:
        pressed = self.query_one("#mode", RadioSet).pressed_button
        if pressed is not None and pressed.id == "mode-write":
            return ChallengeMode.WRITE_FULL
        return ChallengeMode.FILL_GAPS

    def show_error(self, message: str) -> None:
        """Show an error banner above the start button."""
        self.query_one("#error", Static).update(message)

    def reset_for_next_round(self) -> None:
        """Clear the form after a session ends.

        Hosts get a fresh room code, joiners must enter the next one.
        """
        self.query_one("#topic", Input).value = ""
        self.query_one("#room-code", Input).value = generate_room_code() if self.hosting else ""
        self.show_error("")
        self._update_start_button()

    def _apply_session_type(self) -> None:
        """Update labels to match hosting or joining."""
        self.query_one("#btn-host", Button).set_class(self.hosting, "-active")
        self.query_one("#btn-join", Button).set_class(not self.hosting, "-active")

        topic_input = self.query_one("#topic", Input)
        if self.hosting:
            self.query_one("#topic-label", Label).update("What do you want to learn?")
            self.query_one("#code-label", Label).update("Set Join Code")
            topic_input.placeholder = "e.g. React Hooks"
            hint = "Share this code (and the topic!) with friends to play the same challenges."
        else:
            self.query_one("#topic-label", Label).update("Host's Topic")
            self.query_one("#code-label", Label).update("Enter Join Code")
            topic_input.placeholder = "Must match Host's topic"
            hint = "Ensure the Topic and Code match the host's exactly."
        self.query_one("#code-hint", Static).update(hint)
        self.query_one("#btn-start", Button).label = "Start Session" if self.hosting else "Join Session"
        self._update_start_button()

    def _update_start_button(self) -> None:
        ready = bool(self.topic.strip() and self.room_code)
        self.query_one("#btn-start", Button).disabled = not ready

    def on_input_changed(self, event: Input.Changed) -> None:
        """Keep the room code uppercase and the start button in sync."""
        if event.input.id == "room-code":
            upper = event.value.upper()
            if upper != event.value:
                event.input.value = upper
                return
        self._update_start_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Start from either input with Enter."""
        self.action_start()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id

        if button_id == "btn-host":
            self.hosting = True
            self.query_one("#room-code", Input).value = generate_room_code()
            self._apply_session_type()
        elif button_id == "btn-join":
            self.hosting = False
            self.query_one("#room-code", Input).value = ""
            self._apply_session_type()
        elif button_id == "btn-start":
            self.action_start()

    def action_start(self) -> None:
        """Start a session if the form is complete."""
        if not (self.topic.strip() and self.room_code):
            return
        self.show_error("")
        self.app.start_session(self.topic.strip(), self.room_code, self.mode)
