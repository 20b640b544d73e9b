"""
Main entry point for termpong.

Sets up the log file, acquires the terminal, runs the coordinator and
restores the terminal on every exit path.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from termpong.config.settings import Settings, get_settings
from termpong.core.coordinator import Coordinator
from termpong.core.state import GameState
from termpong.errors import ScreenInitError
from termpong.hardware.base import Screen, screen_session

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(log_file: Path, debug: bool = False) -> None:
    """
    Configure logging to an append-only file.

    Nothing goes to the console, the terminal belongs to the game.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[logging.FileHandler(log_file, mode="a", encoding="utf-8")],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="termpong",
        description="Terminal pong. Arrow keys move your paddle, ESC quits.",
    )
    parser.add_argument("--debug", action="store_true", help="Log every ball move")
    parser.add_argument("--log-file", type=Path, help="Log file path (default: app.log)")
    return parser.parse_args(argv)


async def run_game(screen: Screen, settings: Settings) -> GameState:
    """Run one game on an already initialized screen."""
    coordinator = Coordinator(screen, settings)
    return await coordinator.run()


def play(screen: Screen, settings: Settings) -> GameState:
    """Hold the screen for the whole game and release it afterwards."""
    with screen_session(screen):
        return asyncio.run(run_game(screen, settings))


def main(argv: list[str] | None = None) -> None:
    """Console entry point."""
    from termpong.hardware.terminal import TerminalScreen

    load_dotenv()
    args = parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_file or settings.log_file, args.debug or settings.debug)
    logger.info("termpong starting...")

    try:
        state = play(TerminalScreen(), settings)
    except ScreenInitError as e:
        logger.error(f"Screen init failed: {e}")
        print(f"termpong: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)
    else:
        print(f"Final score {state.left.score}:{state.right.score}")

    logger.info("termpong stopped")


if __name__ == "__main__":
    main()
