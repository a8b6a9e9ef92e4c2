from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


class TokenLike(Protocol):
    """Anything exposing the three attributes the stop decision reads."""

    word: str
    lemma: str
    tag: str


@dataclass
class Token:
    """
    A token produced by an upstream tokenizer/tagger/lemmatizer.

    `word`, `lemma` and `tag` are owned by the upstream pipeline and treated as
    read-only here. Annotators write their results into `annotations`, keyed by
    their own name.
    """

    word: str
    lemma: str
    tag: str
    annotations: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.annotations.get(key, default)


@dataclass
class Document:
    """Ordered tokens of one processed text plus the capabilities already applied."""

    tokens: list[Token] = field(default_factory=list)
    text: str = ""
    satisfied: set[str] = field(default_factory=set)


def _record_fields(record: Any) -> tuple[str, str, str]:
    if isinstance(record, Mapping):
        return str(record["word"]), str(record["lemma"]), str(record["tag"])
    word, lemma, tag = record
    return str(word), str(lemma), str(tag)


def document_from_records(
    records: Iterable[Any],
    text: str = "",
    satisfied: Iterable[str] = ("text", "tokens", "ssplit", "pos", "lemma"),
) -> Document:
    """
    Build a Document from pre-annotated records.

    Each record is either a (word, lemma, tag) sequence or a mapping with
    "word", "lemma" and "tag" keys, as emitted by an external tagger.
    """
    tokens = [Token(*_record_fields(r)) for r in records]
    if not text:
        text = " ".join(t.word for t in tokens)
    return Document(tokens=tokens, text=text, satisfied=set(satisfied))


__all__ = ["TokenLike", "Token", "Document", "document_from_records"]
