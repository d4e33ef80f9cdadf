"""Command-line entry point and the main game loop."""

from __future__ import annotations

import argparse
import random
import time
from typing import Optional, Sequence

from .game import GameState
from .input import process_input
from .render import ScreenBuffer, draw_game_over, render_game

FRAME_DELAY = 0.05


def _flush(terminal, buffer: ScreenBuffer) -> None:
    terminal.stream.write(buffer.to_ansi())
    terminal.stream.flush()


def run(terminal, state: Optional[GameState] = None, frame_delay: float = FRAME_DELAY) -> int:
    """Play one round on ``terminal`` and return the final score."""
    if state is None:
        state = GameState()
    buffer = ScreenBuffer()
    with terminal.fullscreen(), terminal.hidden_cursor(), terminal.cbreak():
        _flush(terminal, buffer)
        while not state.game_over:
            process_input(state, terminal)
            state.update()
            render_game(buffer, state)
            _flush(terminal, buffer)
            if frame_delay > 0:
                time.sleep(frame_delay)
        draw_game_over(buffer, state.score)
        _flush(terminal, buffer)
        terminal.inkey()
    return state.score


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapecatch", description="Catch falling shapes before time runs out."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--delay", type=float, default=FRAME_DELAY, help="seconds between frames"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")

    from blessed import Terminal

    state = GameState(rng=random.Random(args.seed))
    run(Terminal(), state, args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())