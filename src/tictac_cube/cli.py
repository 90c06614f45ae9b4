# Area: Shared
"""
tictac_cube.cli — Command-line interface
========================================

Plays a game in the terminal, standing in for the 3D front end.

Usage:
    python -m tictac_cube                          # Defaults
    python -m tictac_cube --config config.json     # Settings from JSON
    python -m tictac_cube --commit-delay 500       # Faster centre commit

Commands (one per line):
    claim <index>      claim a cell, e.g. ``claim 4``
    claim <x> <y> <z>  claim a cell by coordinates
    center             start the delayed claim of the centre cell
    wait               wait out a pending centre claim
    reset              start a new game
    show | help | quit
"""

import argparse
import sys
import time
from typing import Callable, Iterable, List, Optional, TextIO

from ._board.patterns import index_of
from ._config import EngineConfig, build_config, load_config
from ._shared.logging_config import log_rejection, setup_logging
from .display import render_board, render_index_guide
from .engine import GameEngine
from .errors import ConfigError, GatedCellBusy, IllegalMove, OutOfRange

HELP_TEXT = """Commands:
  claim <index>      claim a cell (0-26)
  claim <x> <y> <z>  claim a cell by coordinates
  center             start the delayed claim of the centre cell (13)
  wait               wait for a pending centre claim to commit
  reset              start a new game
  show               print the board
  help               print this text
  quit               leave"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="3x3x3 tic-tac-toe in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tictac_cube
  python -m tictac_cube --config config.json
  TICTAC_COMMIT_DELAY_MS=300 python -m tictac_cube
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument(
        "--commit-delay", type=float,
        help="Centre-cell commit delay in milliseconds (overrides config)",
    )
    parser.add_argument("--no-color", action="store_true", help="Plain text board")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


class GameShell:
    """Line-oriented game loop over a GameEngine."""

    def __init__(
        self,
        engine: GameEngine,
        out: TextIO = sys.stdout,
        color: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.engine = engine
        self.out = out
        self.color = color
        self.sleep = sleep
        engine.on_turn_changed(lambda player: self._say(f"{player.label} to move"))
        engine.on_game_ended(lambda status: self._say(f"Game over: {status.describe()}"))
        engine.on_gated_pending(
            lambda req: self._say(f"{req.claiming_player.label} is claiming the centre...")
        )
        engine.on_gated_committed(
            lambda req: self._say(f"{req.claiming_player.label} took the centre")
        )
        engine.on_gated_cancelled(
            lambda req: self._say(f"Centre claim cancelled ({req.cancel_reason})")
        )

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def show(self) -> None:
        self._say(render_board(self.engine.snapshot(), color=self.color))

    def run(self, lines: Iterable[str]) -> int:
        self._say(render_index_guide())
        self.show()
        for line in lines:
            if not self.execute(line):
                break
        return 0

    def execute(self, line: str) -> bool:
        """Run one command. Returns False when the shell should stop."""
        self.engine.poll()
        words = line.split()
        if not words:
            return True
        command, args = words[0].lower(), words[1:]

        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            self._say(HELP_TEXT)
            return True
        if command == "show":
            self.show()
            return True

        try:
            if command == "claim":
                self.engine.claim_cell(self._parse_index(args))
            elif command in ("center", "centre"):
                self.engine.activate_gated_cell()
            elif command == "wait":
                self._wait_for_commit()
            elif command == "reset":
                self.engine.reset_game()
            else:
                self._say(f"Unknown command: {command} (try 'help')")
                return True
        except (IllegalMove, GatedCellBusy, OutOfRange) as e:
            log_rejection(e)
            self._say(f"Rejected: {e}")
            return True
        except ValueError:
            self._say("Usage: claim <index> | claim <x> <y> <z>")
            return True

        self.show()
        return True

    def _parse_index(self, args: List[str]) -> int:
        if len(args) == 1:
            return int(args[0])
        if len(args) == 3:
            x, y, z = (int(a) for a in args)
            return index_of(x, y, z)
        raise ValueError("expected 1 or 3 numbers")

    def _wait_for_commit(self) -> None:
        request = self.engine.pending_request
        if request is None:
            self._say("Nothing pending")
            return
        remaining = self.engine.claims.commit_due_at - self.engine.scheduler.now()
        if remaining > 0:
            self.sleep(remaining / 1000.0)
        self.engine.poll()


def resolve_config(args: argparse.Namespace) -> EngineConfig:
    config = load_config(args.config)
    overrides = {}
    if args.commit_delay is not None:
        overrides["commit_delay_ms"] = args.commit_delay
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        config = build_config({**config.model_dump(), **overrides})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_file, level=config.level, stream=sys.stderr)
    shell = GameShell(GameEngine(config), color=not args.no_color)
    try:
        return shell.run(sys.stdin)
    except KeyboardInterrupt:
        print("\nBye.")
        return 0
