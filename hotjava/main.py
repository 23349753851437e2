"""Entry point for hotjava."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from . import __version__
from .challenges import ChallengeMode
from .config import get_settings
from .logging_config import setup_logging
from .ui.app import HotJavaApp

logger = logging.getLogger(__name__)

MODES = {
    "fill": ChallengeMode.FILL_GAPS,
    "write": ChallengeMode.WRITE_FULL,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="hotjava",
        description="Gamified coding quiz: fill the gaps or write the code.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--topic", default="", help="Topic to prefill, e.g. 'python loops'")
    parser.add_argument("--code", default="", help="Room code to prefill")
    parser.add_argument(
        "--join",
        action="store_true",
        help="Join an existing room instead of hosting one",
    )
    parser.add_argument("--mode", choices=sorted(MODES), help="Challenge mode")
    parser.add_argument("--hearts", type=int, help="Starting hearts")
    parser.add_argument("--count", type=int, help="Challenges per session")
    parser.add_argument(
        "--offline",
        action="store_true",
        default=None,
        help="Use curated challenges instead of Claude",
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", help="Write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the hotjava application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings(
            initial_hearts=args.hearts,
            challenge_count=args.count,
            offline=args.offline,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValidationError as e:
        parser.error(str(e))
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Starting hotjava %s (ai=%s)", __version__, settings.use_ai)

    app = HotJavaApp(
        settings=settings,
        topic=args.topic,
        room_code=args.code,
        hosting=not args.join,
        mode=MODES.get(args.mode),
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
