"""Rustle game engine: guess scoring and the turn state machine."""

from __future__ import annotations

import enum
import logging
import random
from collections import Counter
from dataclasses import dataclass

from config import GameConfig
from lexicon import Lexicon, normalize_word


logger = logging.getLogger(__name__)


class Verdict(enum.Enum):
    CORRECT = "correct"      # right letter, right position
    MISPLACED = "misplaced"  # right letter, wrong position
    ABSENT = "absent"        # not in the secret, or every copy already used


class GameState(enum.Enum):
    AWAITING_GUESS = "awaiting_guess"
    SCORING = "scoring"
    WON = "won"
    LOST = "lost"


# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------

class InvalidGuess(ValueError):
    """A guess was rejected; the player should be asked again."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class WrongLengthError(InvalidGuess):
    def __init__(self, word_length: int) -> None:
        super().__init__(f"Your guess must be {word_length} letters.")
        self.word_length = word_length


class UnknownWordError(InvalidGuess):
    def __init__(self, word: str) -> None:
        super().__init__(f"{word} isn't in the Rustle dictionary.")
        self.word = word


class GameOverError(RuntimeError):
    """Raised when a guess is submitted after the game has ended."""


# ------------------------------------------------------------------
# Scoring
# ------------------------------------------------------------------

@dataclass(frozen=True)
class ScoredGuess:
    word: str
    letters: tuple[tuple[str, Verdict], ...]

    @property
    def verdicts(self) -> tuple[Verdict, ...]:
        return tuple(v for _, v in self.letters)

    @property
    def is_win(self) -> bool:
        return all(v is Verdict.CORRECT for _, v in self.letters)


def score_guess(secret: str, guess: str) -> ScoredGuess:
    """Score *guess* against *secret* letter by letter.

    Exact matches are taken first and each one uses up a copy of its letter.
    The remaining positions are then resolved left to right: a letter is
    misplaced while the secret still has an unused copy of it, otherwise it
    is absent.
    """
    n = len(secret)
    if len(guess) != n:
        raise ValueError(
            f"guess length ({len(guess)}) != secret length ({n})"
        )

    verdicts = [Verdict.ABSENT] * n
    remaining = Counter(secret)

    # Pass 1 - exact matches
    for i, (s, g) in enumerate(zip(secret, guess)):
        if g == s:
            verdicts[i] = Verdict.CORRECT
            remaining[g] -= 1

    # Pass 2 - misplaced letters
    for i, g in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        if remaining[g] > 0:
            verdicts[i] = Verdict.MISPLACED
            remaining[g] -= 1

    return ScoredGuess(word=guess, letters=tuple(zip(guess, verdicts)))


def absent_letters(scored: ScoredGuess) -> set[str]:
    """Letters of *scored* that are absent at every position they occupy."""
    found = {c for c, v in scored.letters if v is not Verdict.ABSENT}
    return {c for c, _ in scored.letters if c not in found}


# ------------------------------------------------------------------
# Game
# ------------------------------------------------------------------

class WordleGame:
    """A single game against one secret word.

    Parameters
    ----------
    lexicon : Lexicon
        Candidate words; the secret and every accepted guess come from it.
    config : GameConfig or None
        Word length and attempt limit.  Defaults to ``GameConfig()`` with the
        lexicon's word length.
    secret : str or None
        Fixed secret word.  None picks one uniformly at random.
    rng : random.Random or None
        Source of randomness for picking the secret.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        config: GameConfig | None = None,
        secret: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if config is None:
            config = GameConfig(word_length=lexicon.word_length)
        if config.word_length != lexicon.word_length:
            raise ValueError(
                f"lexicon word length ({lexicon.word_length}) != "
                f"config word length ({config.word_length})"
            )
        self._lexicon = lexicon
        self._config = config

        if secret is not None:
            secret = normalize_word(secret)
            if secret not in lexicon:
                raise ValueError(f"secret {secret!r} is not in the lexicon")
        self._secret = secret if secret is not None else lexicon.choice(rng)

        self._state = GameState.AWAITING_GUESS
        self._history: list[ScoredGuess] = []
        self._eliminated: set[str] = set()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, raw: str) -> str:
        """Normalize *raw* and check it can be played.

        Raises
        ------
        WrongLengthError
            If the normalized guess has the wrong number of letters.
        UnknownWordError
            If the normalized guess is not a candidate word.
        """
        word = normalize_word(raw)
        if len(word) != self.word_length:
            raise WrongLengthError(self.word_length)
        if word not in self._lexicon:
            raise UnknownWordError(word)
        return word

    def submit(self, raw: str) -> ScoredGuess:
        """Play one guess and return its score.

        A rejected guess raises :class:`InvalidGuess` and leaves the game
        untouched.

        Raises
        ------
        GameOverError
            If the game has already been won or lost.
        """
        if self.is_over:
            raise GameOverError("Game is already over")
        word = self.validate(raw)

        self._state = GameState.SCORING
        scored = score_guess(self._secret, word)
        self._history.append(scored)
        self._eliminated |= absent_letters(scored)

        if word == self._secret:
            self._state = GameState.WON
        elif len(self._history) >= self.max_attempts:
            self._state = GameState.LOST
        else:
            self._state = GameState.AWAITING_GUESS
        logger.debug(
            "guess %d/%d %s -> %s",
            self.attempts, self.max_attempts, word, self._state.value,
        )
        return scored

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def attempts(self) -> int:
        return len(self._history)

    @property
    def is_over(self) -> bool:
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def won(self) -> bool:
        return self._state is GameState.WON

    @property
    def history(self) -> tuple[ScoredGuess, ...]:
        return tuple(self._history)

    @property
    def eliminated_letters(self) -> frozenset[str]:
        return frozenset(self._eliminated)

    @property
    def secret(self) -> str:
        """Reveal the secret word (only after game over)."""
        if not self.is_over:
            raise RuntimeError("Game is still in progress")
        return self._secret

    @property
    def word_length(self) -> int:
        return self._config.word_length

    @property
    def max_attempts(self) -> int:
        return self._config.max_attempts
