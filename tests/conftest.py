from __future__ import annotations

import pytest

from lexicon import Lexicon


WORDS = ["CRANE", "SLATE", "APPLE", "PAPER", "LEVEL", "TRAIN", "ROBIN", "SPEED"]


@pytest.fixture
def lexicon() -> Lexicon:
    return Lexicon(words=list(WORDS), word_length=5)
