#!/usr/bin/env python3
"""Play Rustle in the terminal."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable

import colorama

import render
from config import HEADER_LINES, MAX_TRIES, WORD_LENGTH, GameConfig
from lexicon import load_lexicon
from wordle_env import GameState, InvalidGuess, WordleGame

logger = logging.getLogger(__name__)


def _show_board(game: WordleGame, output: Callable[[str], None]) -> None:
    for line in render.format_history(game.history):
        output(line)
    output(render.format_prompt(game.word_length))
    eliminated = render.format_eliminated(game.eliminated_letters)
    if eliminated:
        output(eliminated)


def play(
    game: WordleGame,
    input_fn: Callable[[], str] | None = None,
    output: Callable[[str], None] = print,
) -> GameState:
    """Run *game* to the end, reading one guess per line.

    Rejected guesses are reported and read again without using up a try.
    ``EOFError`` from *input_fn* is not caught.
    """
    if input_fn is None:
        input_fn = input
    while not game.is_over:
        _show_board(game, output)
        while True:
            raw = input_fn()
            try:
                game.submit(raw)
            except InvalidGuess as exc:
                logger.debug("rejected %r: %s", raw, exc.reason)
                output(render.format_error(exc))
                continue
            break

    for line in render.format_history(game.history):
        output(line)
    if game.won:
        output(render.format_win(game.attempts))
    else:
        output(render.format_loss(game.secret))
    return game.state


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Guess the hidden word in a few tries")
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list (default: bundled list)")
    parser.add_argument("--length", type=int, default=WORD_LENGTH, help="Word length")
    parser.add_argument("--max-tries", type=int, default=MAX_TRIES,
                        help="Guesses allowed per game")
    parser.add_argument("--header-lines", type=int, default=HEADER_LINES,
                        help="Leading lines of the word list to skip")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for picking the secret word")
    parser.add_argument("--verbose", action="store_true", help="Print debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    colorama.just_fix_windows_console()

    try:
        config = GameConfig(
            word_length=args.length,
            max_attempts=args.max_tries,
            header_lines=args.header_lines,
            words_path=args.words,
        )
        lex = load_lexicon(
            path=config.words_path,
            word_length=config.word_length,
            header_lines=config.header_lines,
        )
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    game = WordleGame(lex, config, rng=random.Random(args.seed))
    try:
        play(game)
    except EOFError:
        print("\nNo more input; giving up.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
