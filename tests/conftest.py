# ruff: noqa: E402
# tests/conftest.py
from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Ensure project root importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stopword_annotator.tokens import Token


@pytest.fixture(autouse=True)
def _isolate_stopword_env() -> Iterator[None]:
    """
    Autouse: drop STOPWORDS_* variables for the duration of a test and restore
    the environment afterwards, including anything a .env file injected.
    """
    saved = dict(os.environ)
    for name in list(os.environ):
        if name.startswith("STOPWORDS_"):
            del os.environ[name]
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def stopword_file(tmp_path: Path) -> Path:
    """Newline-delimited list with mixed casing: stop, words, list, in, file."""
    path = tmp_path / "stop-words-list-test.txt"
    path.write_text("Stop\nWORDS\nlist\nIn\nfile\n", encoding="utf-8")
    return path


@pytest.fixture
def make_token() -> Callable[..., Token]:
    def _make(word: str, lemma: str | None = None, tag: str = "NN") -> Token:
        return Token(word=word, lemma=word if lemma is None else lemma, tag=tag)

    return _make


@pytest.fixture
def word_to_stop(make_token: Callable[..., Token]) -> Token:
    return make_token("words", "word", "NONE")


@pytest.fixture
def regular_word(make_token: Callable[..., Token]) -> Token:
    return make_token("justaword", "justaword", "NONE2")
