from __future__ import annotations

import argparse
import logging
from typing import Optional

from connectfour.config import CLEAR_SCREEN, LOG_LEVEL, USE_COLOR
from connectfour.errors import QuitGame, ScriptExhausted
from connectfour.game.controller import GameLoop
from connectfour.game.results import final_line, outcome_message
from connectfour.logs import setup_logging
from connectfour.ui.human import ConsoleInput
from connectfour.ui.render import ConsoleRenderer
from connectfour.ui.scripted import ScriptedInput, parse_script

log = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour", description="Two-player Connect Four in the terminal.")
    ap.add_argument("--moves", type=str, default=None, help="Comma separated columns to play headless, e.g. 3,3,4")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)",
    )
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    renderer = ConsoleRenderer(
        use_color=USE_COLOR and not args.no_color,
        clear=CLEAR_SCREEN and not args.no_clear,
    )

    if args.moves is not None:
        try:
            columns = parse_script(args.moves)
        except ValueError:
            ap.error(f"invalid --moves value: {args.moves!r} (expected comma separated columns)")
        source = ScriptedInput(columns)
    else:
        source = ConsoleInput()

    game = GameLoop(source, renderer)
    try:
        state = game.run()
    except ScriptExhausted as e:
        print(str(e))
        return 1
    except (QuitGame, EOFError):
        print("\nGame quit.")
        return 0
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        return 130

    message = outcome_message(state)
    renderer.render(state.board, status=message, highlight=final_line(state))
    print(message)
    log.info("Game finished: %s", state.status.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
