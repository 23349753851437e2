"""Main Textual application."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header
from textual.worker import Worker

from ..ai import ChallengeGenerator, ClaudeClient
from ..challenges import ChallengeMode, ChallengeSession, ChallengeSource, GenerationError, start_session
from ..config import GameSettings
from .screens.game import GameScreen
from .screens.landing import LandingScreen
from .screens.loading import LoadingScreen
from .screens.result import ResultScreen

logger = logging.getLogger(__name__)

GENERATION_ERROR_MESSAGE = (
    "We couldn't brew your challenges. Please check your connection or try a specific topic."
)


def build_source(settings: GameSettings) -> ChallengeSource:
    """Pick Claude or the curated templates according to settings."""
    if settings.use_ai:
        return ChallengeGenerator(ClaudeClient(api_key=settings.anthropic_api_key, model=settings.model))
    logger.info("No API key or offline mode; using curated challenges")
    return ChallengeGenerator()


class HotJavaApp(App):
    """Gamified coding quiz application."""

    TITLE = "HOTJAVA"
    SUB_TITLE = "Brew your code skills"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-content {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }

    .title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    .subtitle {
        color: $text-muted;
        margin-bottom: 1;
    }

    .hint {
        color: $text-muted;
        text-style: italic;
    }

    *:focus {
        border: solid $success;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("f1", "help", "Help", show=True),
    ]

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        source: Optional[ChallengeSource] = None,
        topic: str = "",
        room_code: str = "",
        hosting: bool = True,
        mode: Optional[ChallengeMode] = None,
    ):
        super().__init__()
        self.settings = settings or GameSettings()
        self.source = source or build_source(self.settings)
        self._landing = LandingScreen(
            topic=topic,
            room_code=room_code,
            hosting=hosting,
            mode=mode or self.settings.default_mode,
        )
        self._generation: Optional[Worker] = None

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield Header()
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(self._landing)

    def start_session(self, topic: str, room_code: str, mode: ChallengeMode) -> None:
        """Show the loading screen and request challenges in the background."""
        self.push_screen(LoadingScreen(room_code, hosting=self._landing.hosting))
        self._generation = self.run_worker(
            self._generate(topic, room_code, mode),
            name="generation",
            group="generation",
            exclusive=True,
        )

    async def _generate(self, topic: str, room_code: str, mode: ChallengeMode) -> None:
        """Fetch challenges, then open the game or report the failure."""
        try:
            session = await start_session(
                self.source,
                topic,
                room_code,
                mode,
                count=self.settings.challenge_count,
                initial_hearts=self.settings.initial_hearts,
            )
        except GenerationError as e:
            logger.error("Challenge generation failed: %s", e)
            self._generation = None
            self.pop_screen()
            self._landing.show_error(GENERATION_ERROR_MESSAGE)
            return

        self._generation = None
        if session.is_terminal:
            self.finish_session(session, room_code)
        else:
            self.switch_screen(GameScreen(session, room_code, fail_delay=self.settings.fail_delay))

    def cancel_generation(self) -> None:
        """Cancel a pending generation and go back to the landing screen."""
        if self._generation is not None:
            self._generation.cancel()
            self._generation = None
            logger.info("Challenge generation cancelled")
        if self.screen is not self._landing:
            self.pop_screen()

    def finish_session(self, session: ChallengeSession, room_code: str) -> None:
        """Replace the current screen with the result of a terminated session."""
        summary = session.summary()
        logger.info("Session over: %s with %d xp", summary.outcome.value, summary.xp)
        self.switch_screen(ResultScreen(summary, room_code))

    def back_to_landing(self) -> None:
        """Leave the game or result screen for a fresh landing screen."""
        if self.screen is not self._landing:
            self.pop_screen()
        self._landing.reset_for_next_round()

    def action_help(self) -> None:
        """Show help."""
        self.notify(
            "Enter: next gap / check answer\n"
            "Ctrl+S: check or continue\n"
            "Esc: leave the current session\n"
            "Ctrl+Q: quit",
            title="Keys",
            timeout=10,
        )
