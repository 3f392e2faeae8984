"""Word-list loading utilities.

The bundled asset is plain text: a short header, then one word per line.
Lines are free-form and normalized here (case-folded to uppercase, anything
that is not an ASCII letter removed); only words of the configured length
are kept.
"""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass, field
from pathlib import Path

from config import HEADER_LINES, WORD_LENGTH


_DIR = Path(__file__).resolve().parent
DEFAULT_WORDS_PATH = _DIR / "data" / "words.txt"

_LETTERS = frozenset(string.ascii_uppercase)

logger = logging.getLogger(__name__)


def normalize_word(text: str) -> str:
    """Trim, uppercase and strip non-alphabetic characters from *text*."""
    return "".join(ch for ch in text.strip().upper() if ch in _LETTERS)


# ------------------------------------------------------------------
# Lexicon dataclass
# ------------------------------------------------------------------

@dataclass
class Lexicon:
    """The candidate words of one word length."""
    words: list[str]
    word_length: int
    _index: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._index = frozenset(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self.words)

    def choice(self, rng: random.Random | None = None) -> str:
        """Pick one word uniformly at random."""
        if not self.words:
            raise ValueError("cannot choose from an empty lexicon")
        return (rng or random).choice(self.words)


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------

def parse_word_list(
    text: str,
    word_length: int = WORD_LENGTH,
    header_lines: int = HEADER_LINES,
) -> list[str]:
    """Return the candidate words found in raw word-list *text*.

    The first *header_lines* lines are skipped whatever they contain.
    Remaining lines are normalized and kept only if exactly *word_length*
    letters long; blank or malformed lines are dropped silently.  Duplicates
    keep their first position.
    """
    seen: set[str] = set()
    words: list[str] = []
    for raw in text.splitlines()[header_lines:]:
        w = normalize_word(raw)
        if len(w) != word_length or w in seen:
            continue
        seen.add(w)
        words.append(w)
    return words


def load_lexicon(
    path: str | Path | None = None,
    word_length: int = WORD_LENGTH,
    header_lines: int = HEADER_LINES,
) -> Lexicon:
    """Load a word list and build the candidate set.

    Parameters
    ----------
    path : str, Path or None
        Plain-text word list.  None uses the bundled ``data/words.txt``.
    word_length : int
        Only keep words of this exact length.
    header_lines : int
        Number of leading lines to ignore.

    Returns
    -------
    Lexicon

    Raises
    ------
    FileNotFoundError
        If the word list does not exist.
    ValueError
        If no word of *word_length* letters is found.
    """
    src = Path(path) if path is not None else DEFAULT_WORDS_PATH
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")

    words = parse_word_list(
        src.read_text(encoding="utf-8"),
        word_length=word_length,
        header_lines=header_lines,
    )
    if not words:
        raise ValueError(f"No {word_length}-letter words found in {src}")

    logger.debug("loaded %d %d-letter words from %s", len(words), word_length, src)
    return Lexicon(words=words, word_length=word_length)
