from __future__ import annotations

import argparse
import curses
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from typedefender.assets.registry import AssetLoadError, Language
from typedefender.assets.startup import default_project_root, init_assets_for_app
from typedefender.config import GameSettings, settings_from_env
from typedefender.core.errors import ConfigurationError, GameError, InvariantViolationError
from typedefender.ui.screens import CursesScreens
from typedefender.ui.shell import run_shell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="type-defender", description="Type the words before they escape.")
    parser.add_argument("--language", choices=[lang.value for lang in Language], help="Preselected language.")
    parser.add_argument("--fps", type=int, dest="tick_rate", help="Simulation steps per second.")
    parser.add_argument("--seed", type=int, help="Seed for reproducible sessions.")
    parser.add_argument("--skip-home", action="store_true", help="Start playing right away.")
    parser.add_argument(
        "--log-file",
        default=os.environ.get("TYPEDEFENDER_LOG_FILE", "type-defender.log"),
        help="Where to write logs (curses owns the terminal). Use '-' to disable.",
    )
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    return parser


def configure_logging(*, log_file: str, debug: bool) -> None:
    if log_file == "-":
        logging.disable(logging.CRITICAL)
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _curses_main(stdscr: curses.window, settings: GameSettings, skip_home: bool) -> None:
    assets = init_assets_for_app()
    screens = CursesScreens(stdscr, settings)
    fsm = run_shell(screens, assets=assets, settings=settings, skip_home=skip_home)
    logger.info("exit after %d session(s), last score %.1f", fsm.sessions_played, fsm.last_score)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    env_path = default_project_root() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    configure_logging(log_file=args.log_file, debug=args.debug)

    # Keep Esc responsive; curses otherwise waits ~1s to tell it apart from escape sequences.
    os.environ.setdefault("ESCDELAY", "25")

    try:
        settings = settings_from_env(
            overrides={"language": args.language, "tick_rate": args.tick_rate, "seed": args.seed}
        )
        curses.wrapper(_curses_main, settings, args.skip_home)
    except InvariantViolationError as e:
        logger.exception("internal error")
        print(f"Internal error: {e}", file=sys.stderr)
        return 70
    except (ConfigurationError, AssetLoadError) as e:
        logger.error("configuration error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except GameError as e:
        logger.error("game error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
