"""Text formatting for the console game.

Verdicts map to plain tags first; tags map to colorama styles only at the
last step, so everything above :func:`colorize` can be checked without
escape sequences.
"""

from __future__ import annotations

from typing import Iterable

from colorama import Fore, Style

from wordle_env import ScoredGuess, Verdict


CORRECT = "correct"
MISPLACED = "misplaced"
ABSENT = "absent"

_TAGS = {
    Verdict.CORRECT: CORRECT,
    Verdict.MISPLACED: MISPLACED,
    Verdict.ABSENT: ABSENT,
}

TAG_STYLES = {
    CORRECT: Fore.LIGHTGREEN_EX,
    MISPLACED: Fore.LIGHTYELLOW_EX,
    ABSENT: Fore.LIGHTRED_EX,
}


def verdict_tag(verdict: Verdict) -> str:
    return _TAGS[verdict]


def colorize(text: str, tag: str) -> str:
    return f"{TAG_STYLES[tag]}{text}{Style.RESET_ALL}"


def guess_tags(scored: ScoredGuess) -> list[tuple[str, str]]:
    """(letter, tag) pairs for one scored guess."""
    return [(c, verdict_tag(v)) for c, v in scored.letters]


def format_guess(scored: ScoredGuess) -> str:
    return "".join(colorize(c, tag) for c, tag in guess_tags(scored))


def format_history(history: Iterable[ScoredGuess]) -> list[str]:
    """Numbered lines, one per guess, starting at 1."""
    return [f"{n}: {format_guess(g)}" for n, g in enumerate(history, start=1)]


def format_eliminated(letters: Iterable[str]) -> str:
    """``Letters not in the word: ...`` or an empty string if none."""
    letters = sorted(letters)
    if not letters:
        return ""
    return "Letters not in the word: " + " ".join(letters)


def format_prompt(word_length: int) -> str:
    return (f"{Fore.CYAN}Enter your word guess ({word_length} letters) "
            f"and press ENTER{Style.RESET_ALL}")


def format_error(exc: Exception) -> str:
    return f"{Fore.RED}{exc}{Style.RESET_ALL}"


def format_win(attempts: int) -> str:
    return f"Correct! You guessed the word in {attempts} tries."


def format_loss(secret: str) -> str:
    return f"{Fore.LIGHTRED_EX}You ran out of tries! The word was {secret}{Style.RESET_ALL}"
