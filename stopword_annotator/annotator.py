from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from typing import Any, Protocol

from .config import ANNOTATOR_NAME, StopwordConfig, resolve_config
from .engine import should_annotate, stop_reason
from .tokens import Document, Token

log = logging.getLogger(__name__)

# Capabilities the stop decision reads; produced by upstream annotators.
REQUIRED_CAPABILITIES: frozenset[str] = frozenset({"text", "tokens", "ssplit", "pos", "lemma"})


class Annotator(Protocol):
    """
    Pipeline extension point.

    An annotator names the capabilities it needs from earlier annotators and
    the ones it provides to later ones. The pipeline checks these before
    running anything.
    """

    name: str

    def annotate(self, document: Document) -> None:
        """Mutate `document` in place by attaching this annotator's results."""
        ...

    def requires(self) -> frozenset[str]: ...

    def requirements_satisfied(self) -> frozenset[str]: ...


class StopwordsAnnotator:
    """
    Marks each token as stopped (True) or content-bearing (False).

    The verdict is stored on `token.annotations[self.name]`. When the config has
    no stopword list (and annotate_without_stopwords is off) nothing is written
    at all, so is_stopped() returns None for every token.
    """

    def __init__(self, config: StopwordConfig, name: str = ANNOTATOR_NAME) -> None:
        self.config = config
        self.name = name

    @classmethod
    def from_properties(
        cls, properties: Mapping[str, Any], name: str = ANNOTATOR_NAME
    ) -> StopwordsAnnotator:
        return cls(resolve_config(properties, prefix=name), name=name)

    def requires(self) -> frozenset[str]:
        return REQUIRED_CAPABILITIES

    def requirements_satisfied(self) -> frozenset[str]:
        return frozenset({self.name})

    def annotate(self, document: Document) -> None:
        if not should_annotate(self.config):
            log.debug("%s: no stopword list configured; leaving tokens unannotated", self.name)
            return

        reasons: Counter[str] = Counter()
        for token in document.tokens:
            reason = stop_reason(token, self.config)
            token.annotations[self.name] = reason is not None
            if reason is not None:
                reasons[reason.value] += 1

        log.debug(
            "%s: stopped %d of %d tokens %s",
            self.name,
            sum(reasons.values()),
            len(document.tokens),
            dict(reasons),
        )


def is_stopped(token: Token, key: str = ANNOTATOR_NAME) -> bool | None:
    """True/False once annotated; None if the annotator wrote no verdict."""
    return token.annotations.get(key)


def content_tokens(document: Document, key: str = ANNOTATOR_NAME) -> list[Token]:
    """Tokens explicitly marked as not stopped."""
    return [t for t in document.tokens if is_stopped(t, key) is False]


def content_lemmas(document: Document, key: str = ANNOTATOR_NAME) -> list[str]:
    """Lemmas of content tokens, first occurrence order, without duplicates."""
    return list(dict.fromkeys(t.lemma for t in content_tokens(document, key)))


__all__ = [
    "REQUIRED_CAPABILITIES",
    "Annotator",
    "StopwordsAnnotator",
    "is_stopped",
    "content_tokens",
    "content_lemmas",
]
