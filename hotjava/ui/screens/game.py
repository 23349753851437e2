"""Screen that plays through a challenge session."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Input, Static, TextArea

from ...challenges import Challenge, ChallengeMode, ChallengeSession, Feedback
from ..widgets.stats_bar import StatsBar


def render_gap_code(challenge: Challenge) -> str:
    """Render code with numbered blanks, e.g. ``[1]____``."""
    segments = challenge.code_segments()
    parts = [segments[0]]
    for number, segment in enumerate(segments[1:], start=1):
        parts.append(f"[{number}]____")
        parts.append(segment)
    return "".join(parts)


class GameScreen(Screen):
    """Answer challenges one by one until the session ends."""

    CSS = """
    #challenge-area {
        height: 1fr;
        padding: 1 2;
    }

    #code {
        padding: 1 2;
        margin: 1 0;
        border: solid $primary;
        background: $surface-darken-1;
    }

    #answers {
        height: auto;
    }

    #answers Input {
        margin-bottom: 1;
    }

    #full-code {
        height: 12;
    }

    #feedback {
        height: auto;
        padding: 1 2;
    }

    #feedback.correct {
        background: $success-darken-2;
        border: solid $success;
    }

    #feedback.incorrect {
        background: $error-darken-2;
        border: solid $error;
    }

    #game-actions {
        height: auto;
        padding: 1 2;
    }

    #game-actions Button {
        margin-right: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "exit_game", "Esc:Exit", show=True),
        Binding("ctrl+s", "check", "Check", show=True),
    ]

    def __init__(self, session: ChallengeSession, room_code: str, fail_delay: float = 1.0, **kwargs):
        super().__init__(**kwargs)
        self.session = session
        self.room_code = room_code
        self.fail_delay = fail_delay

    def compose(self) -> ComposeResult:
        """Compose the game screen."""
        yield StatsBar(self.room_code, id="stats")
        with VerticalScroll(id="challenge-area"):
            yield Static("", id="question", classes="title", markup=False)
            yield Static("", id="description", classes="subtitle", markup=False)
            yield Static("", id="code", markup=False)
            yield Vertical(id="answers")
            yield Static("", id="hint", classes="hint", markup=False)
        yield Static("", id="feedback", markup=False)
        with Horizontal(id="game-actions"):
            yield Button("Check", id="btn-check", variant="warning")
            yield Button("Show Solution", id="btn-solution", variant="error")
            yield Button("Exit", id="btn-exit", variant="default")

    async def on_mount(self) -> None:
        """Show the first challenge."""
        await self._load_challenge()

    async def _load_challenge(self) -> None:
        """Render the current challenge with empty answer fields."""
        challenge = self.session.current_challenge()
        stats = self.query_one("#stats", StatsBar)
        stats.refresh_stats(self.session)

        self.query_one("#question", Static).update(challenge.question)
        self.query_one("#description", Static).update(challenge.description)

        answers = self.query_one("#answers", Vertical)
        await answers.remove_children()
        hint = ""
        if self.session.mode is ChallengeMode.FILL_GAPS:
            self.query_one("#code", Static).update(render_gap_code(challenge))
            inputs = [
                Input(placeholder=f"Gap {number}", id=f"gap-{number - 1}")
                for number in range(1, challenge.gap_count + 1)
            ]
            if inputs:
                await answers.mount(*inputs)
                inputs[0].focus()
            else:
                hint = "No blanks in this one. Press Check."
        else:
            self.query_one("#code", Static).update(challenge.code_with_gaps)
            editor = TextArea(id="full-code")
            await answers.mount(editor)
            editor.focus()
            hint = f'Need help? Try to recall the syntax for "{challenge.topic}".'
        self.query_one("#hint", Static).update(hint)

        feedback = self.query_one("#feedback", Static)
        feedback.update("")
        feedback.remove_class("correct", "incorrect")

        check = self.query_one("#btn-check", Button)
        check.label = "Check"
        check.disabled = False
        self.query_one("#btn-solution", Button).display = False

    def _collect_answer(self) -> None:
        """Copy what the player typed into the session buffer."""
        if self.session.mode is ChallengeMode.FILL_GAPS:
            for field in self.query("#answers Input").results(Input):
                index = int(field.id.removeprefix("gap-"))
                self.session.set_gap_input(index, field.value)
        else:
            self.session.set_full_input(self.query_one("#full-code", TextArea).text)

    def _lock_answers(self) -> None:
        for field in self.query("#answers Input").results(Input):
            field.disabled = True
        for editor in self.query("#full-code").results(TextArea):
            editor.read_only = True

    async def action_check(self) -> None:
        """Check the answer, or move on when feedback is showing."""
        if self.session.is_terminal:
            return
        if self.session.feedback is not Feedback.PENDING:
            if not self.session.out_of_hearts:
                await self._advance()
            return

        challenge = self.session.current_challenge()
        self._collect_answer()
        correct = self.session.submit()
        self._lock_answers()
        self.query_one("#stats", StatsBar).refresh_stats(self.session)

        feedback = self.query_one("#feedback", Static)
        check = self.query_one("#btn-check", Button)
        if correct:
            feedback.add_class("correct")
            feedback.update(f"Excellent!\n{challenge.explanation}")
        else:
            feedback.add_class("incorrect")
            feedback.update("Not quite right...")
            self.query_one("#btn-solution", Button).display = True

        if self.session.out_of_hearts:
            check.label = "Out of hearts"
            check.disabled = True
            self.set_timer(self.fail_delay, self._advance)
        else:
            check.label = "Finish" if self.session.is_last_challenge else "Continue"
            check.focus()

    async def _advance(self) -> None:
        """Advance the session and show the next challenge or the result."""
        if self.session.is_terminal:
            return
        self.session.advance()
        if self.session.is_terminal:
            self.app.finish_session(self.session, self.room_code)
        else:
            await self._load_challenge()

    def _show_solution(self) -> None:
        challenge = self.session.current_challenge()
        self.query_one("#feedback", Static).update(f"Not quite right...\n\n{challenge.full_solution}")
        self.query_one("#btn-solution", Button).display = False

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the last gap checks the answer."""
        fields = list(self.query("#answers Input").results(Input))
        if fields and event.input is not fields[-1]:
            fields[fields.index(event.input) + 1].focus()
            return
        await self.action_check()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id

        if button_id == "btn-check":
            await self.action_check()
        elif button_id == "btn-solution":
            self._show_solution()
        elif button_id == "btn-exit":
            self.action_exit_game()

    def action_exit_game(self) -> None:
        """Abandon the session and return to the landing screen."""
        self.app.back_to_landing()
