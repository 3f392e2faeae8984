"""Game settings shared by the loader, the engine and the console loop."""

from __future__ import annotations

from dataclasses import dataclass


WORD_LENGTH = 5
MAX_TRIES = 6
# Leading lines of the word-list asset that are not words.
HEADER_LINES = 2


@dataclass(frozen=True)
class GameConfig:
    """All settings a game is started with.

    Attributes
    ----------
    word_length : int
        Number of letters in every candidate word and guess.
    max_attempts : int
        Accepted guesses allowed before the game is lost.
    header_lines : int
        Lines skipped at the top of the word list.
    words_path : str or None
        Word list to load.  None uses the bundled ``data/words.txt``.
    """

    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_TRIES
    header_lines: int = HEADER_LINES
    words_path: str | None = None

    def __post_init__(self) -> None:
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive, got {self.word_length}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")
        if self.header_lines < 0:
            raise ValueError(f"header_lines must be >= 0, got {self.header_lines}")
