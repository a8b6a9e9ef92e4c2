"""
Stop decision for a single token.

Rules are checked in a fixed order and the first match is reported as the
reason. All rules are ORed, so the order only affects which reason is
reported, never the verdict:

  1. surface word shorter than minimum_word_length
  2. lemma shorter than minimum_lemma_length
  3. tag in stop_pos_categories
  4. lemma (or word, unless check_only_lemmas) in stopwords, case-insensitive

Whether verdicts are written at all is decided once per document by
should_annotate(); see StopwordsAnnotator.annotate.
"""

from __future__ import annotations

from enum import Enum

from .config import StopwordConfig
from .tokens import TokenLike


class StopReason(str, Enum):
    WORD_TOO_SHORT = "word_too_short"
    LEMMA_TOO_SHORT = "lemma_too_short"
    POS_CATEGORY = "pos_category"
    STOPWORD = "stopword"


def should_annotate(config: StopwordConfig) -> bool:
    """
    Legacy gate: with no lexical stopword source, no verdict is written,
    even if length or POS rules are configured.

    The gate keys on whether a source was configured, not on its contents: an
    empty inline list or a file holding only blank/comment lines still
    annotates. Configs built directly (source=None) count as having a source
    when they carry stopwords.
    """
    if config.annotate_without_stopwords:
        return True
    return config.source is not None or bool(config.stopwords)


def _matches_stopword(token: TokenLike, config: StopwordConfig) -> bool:
    if token.lemma.lower() in config.stopwords:
        return True
    if config.check_only_lemmas:
        return False
    return token.word.lower() in config.stopwords


def stop_reason(token: TokenLike, config: StopwordConfig) -> StopReason | None:
    """Return the first rule that stops `token`, or None if it is a content token."""
    if len(token.word) < config.minimum_word_length:
        return StopReason.WORD_TOO_SHORT
    if len(token.lemma) < config.minimum_lemma_length:
        return StopReason.LEMMA_TOO_SHORT
    if token.tag in config.stop_pos_categories:
        return StopReason.POS_CATEGORY
    if _matches_stopword(token, config):
        return StopReason.STOPWORD
    return None


def decide(token: TokenLike, config: StopwordConfig) -> bool:
    return stop_reason(token, config) is not None


__all__ = ["StopReason", "should_annotate", "stop_reason", "decide"]
