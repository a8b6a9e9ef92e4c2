from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .exceptions import (
    ConfigFileNotFound,
    InvalidBooleanConfig,
    InvalidConfigFile,
    InvalidNumericConfig,
)
from .sources import StopwordSource, load_file, load_inline, load_resource, split_csv

log = logging.getLogger(__name__)

# Identity of the annotator; also the default property prefix and the key the
# verdict is stored under on each token.
ANNOTATOR_NAME = "stopwords"

# ---- Property suffixes (looked up as "<prefix>.<suffix>") ----
CHECK_ONLY_LEMMAS = "checkOnlyLemmas"
STOP_POS_CATEGORIES = ("withPosCategories", "stopPosCategories")
USE_DEFAULT_POS_CATEGORIES = "useDefaultPosCategories"
STOP_ALL_WORDS_SHORTER_THAN = ("shorterThan", "stopAllWordsShorterThan")
STOP_ALL_LEMMAS_SHORTER_THAN = ("withLemmasShorterThan", "stopAllLemmasShorterThan")
STOP_WORDS_LIST = "customList"
STOP_WORDS_FILE_PATH = "customListFilePath"
STOP_WORDS_RESOURCES_FILE_PATH = "customListResourcesFilePath"
ANNOTATE_WITHOUT_STOPWORDS = "annotateWithoutStopwords"

RECOGNIZED_SUFFIXES: frozenset[str] = frozenset(
    {
        CHECK_ONLY_LEMMAS,
        *STOP_POS_CATEGORIES,
        USE_DEFAULT_POS_CATEGORIES,
        *STOP_ALL_WORDS_SHORTER_THAN,
        *STOP_ALL_LEMMAS_SHORTER_THAN,
        STOP_WORDS_LIST,
        STOP_WORDS_FILE_PATH,
        STOP_WORDS_RESOURCES_FILE_PATH,
        ANNOTATE_WITHOUT_STOPWORDS,
    }
)

# Penn Treebank closed-class tags: conjunctions, determiners, pronouns, modals,
# particles, interjections, possessive endings, symbols, wh-words, proper nouns.
DEFAULT_STOP_POS_CATEGORIES: frozenset[str] = frozenset(
    {
        "CC",
        "IN",
        "DT",
        "PDT",
        "PRP",
        "PRP$",
        "MD",
        "RP",
        "UH",
        "POS",
        "SYM",
        "WDT",
        "WP",
        "WP$",
        "WRB",
        "EX",
        "FW",
        "NNP",
        "NNPS",
    }
)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StopwordConfig:
    """
    Resolved, immutable settings for the stop decision.

    An empty `stopwords` set means "no lexical filtering"; thresholds of 0 mean
    "no length filtering".
    """

    stopwords: frozenset[str] = frozenset()
    stop_pos_categories: frozenset[str] = frozenset()
    minimum_word_length: int = 0
    minimum_lemma_length: int = 0
    check_only_lemmas: bool = True
    annotate_without_stopwords: bool = False
    source: StopwordSource | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.minimum_word_length < 0:
            raise InvalidNumericConfig("minimum_word_length", self.minimum_word_length)
        if self.minimum_lemma_length < 0:
            raise InvalidNumericConfig("minimum_lemma_length", self.minimum_lemma_length)
        # Accept any iterable of strings from direct construction
        object.__setattr__(self, "stopwords", frozenset(w.lower() for w in self.stopwords))
        object.__setattr__(
            self, "stop_pos_categories", frozenset(c.upper() for c in self.stop_pos_categories)
        )


# -------------------------------
# Property helpers
# -------------------------------


def _key(prefix: str, suffix: str) -> str:
    return f"{prefix}.{suffix}" if prefix else suffix


def _lookup(props: Mapping[str, Any], prefix: str, *suffixes: str) -> tuple[str, str] | None:
    """Return (key, raw value) for the first suffix present, else None."""
    for suffix in suffixes:
        key = _key(prefix, suffix)
        if key in props and props[key] is not None:
            return key, str(props[key])
    return None


def _prop_int(props: Mapping[str, Any], prefix: str, *suffixes: str, default: int = 0) -> int:
    found = _lookup(props, prefix, *suffixes)
    if found is None:
        return default
    key, raw = found
    try:
        value = int(raw.strip())
    except ValueError as err:
        raise InvalidNumericConfig(key, raw) from err
    if value < 0:
        raise InvalidNumericConfig(key, raw)
    return value


def _prop_bool(props: Mapping[str, Any], prefix: str, suffix: str, default: bool) -> bool:
    found = _lookup(props, prefix, suffix)
    if found is None:
        return default
    key, raw = found
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise InvalidBooleanConfig(key, raw)


def _prop_categories(props: Mapping[str, Any], prefix: str, use_default: bool) -> frozenset[str]:
    found = _lookup(props, prefix, *STOP_POS_CATEGORIES)
    if found is not None:
        return frozenset(tok.upper() for tok in split_csv(found[1]))
    if use_default:
        return DEFAULT_STOP_POS_CATEGORIES
    return frozenset()


def _resolve_stopwords(
    props: Mapping[str, Any], prefix: str
) -> tuple[frozenset[str], StopwordSource | None]:
    """
    Pick exactly one stopword source. Order of precedence:
    inline list, then file path, then bundled resource.
    """
    candidates: list[tuple[StopwordSource, str]] = []
    for source, suffix in (
        ("inline", STOP_WORDS_LIST),
        ("file", STOP_WORDS_FILE_PATH),
        ("resource", STOP_WORDS_RESOURCES_FILE_PATH),
    ):
        found = _lookup(props, prefix, suffix)
        if found is not None:
            candidates.append((source, found[1]))

    if not candidates:
        return frozenset(), None

    (chosen, raw), ignored = candidates[0], candidates[1:]
    if ignored:
        log.info(
            "Stopwords taken from %s source; ignoring %s",
            chosen,
            ", ".join(source for source, _ in ignored),
        )

    if chosen == "inline":
        return load_inline(raw), chosen
    if chosen == "file":
        return load_file(raw), chosen
    return load_resource(raw), chosen


def _warn_unknown(props: Mapping[str, Any], prefix: str) -> None:
    if not prefix:
        return
    head = prefix + "."
    for key in props:
        # Raw YAML may hand over int/bool keys
        if not isinstance(key, str) or not key.startswith(head):
            continue
        if key[len(head) :] not in RECOGNIZED_SUFFIXES:
            log.debug("Ignoring unrecognized property %s", key)


def resolve_config(properties: Mapping[str, Any], prefix: str = ANNOTATOR_NAME) -> StopwordConfig:
    """
    Build a StopwordConfig from a flat key/value mapping.

    Keys are "<prefix>.<suffix>" (e.g. "stopwords.customList"); pass prefix=""
    for bare suffixes. Raises a StopwordConfigError subclass on bad input
    rather than falling back to defaults.
    """
    _warn_unknown(properties, prefix)

    use_default_pos = _prop_bool(properties, prefix, USE_DEFAULT_POS_CATEGORIES, False)
    stopwords, source = _resolve_stopwords(properties, prefix)

    cfg = StopwordConfig(
        stopwords=stopwords,
        stop_pos_categories=_prop_categories(properties, prefix, use_default_pos),
        minimum_word_length=_prop_int(properties, prefix, *STOP_ALL_WORDS_SHORTER_THAN),
        minimum_lemma_length=_prop_int(properties, prefix, *STOP_ALL_LEMMAS_SHORTER_THAN),
        check_only_lemmas=_prop_bool(properties, prefix, CHECK_ONLY_LEMMAS, True),
        annotate_without_stopwords=_prop_bool(properties, prefix, ANNOTATE_WITHOUT_STOPWORDS, False),
        source=source,
    )
    log.debug(
        "Resolved stopword config: %d stopwords (%s), %d POS categories, "
        "word<%d, lemma<%d, check_only_lemmas=%s",
        len(cfg.stopwords),
        cfg.source or "none",
        len(cfg.stop_pos_categories),
        cfg.minimum_word_length,
        cfg.minimum_lemma_length,
        cfg.check_only_lemmas,
    )
    return cfg


# -------------------------------
# Configuration layers
# -------------------------------


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_stringify(v) for v in value)
    return str(value)


def _flatten(data: Mapping[str, Any], parent: str = "") -> dict[str, str]:
    out: dict[str, str] = {}
    for k, v in data.items():
        key = f"{parent}.{k}" if parent else str(k)
        if isinstance(v, Mapping):
            out.update(_flatten(v, key))
        elif v is not None:
            out[key] = _stringify(v)
    return out


def _parse_properties(text: str) -> dict[str, str]:
    """
    Parse Java-style .properties text: "key=value" or "key: value" per line,
    '#' and '!' start comments. Line continuations are not supported.
    """
    out: dict[str, str] = {}
    for line in text.splitlines():
        raw = line.strip()
        if not raw or raw[0] in "#!":
            continue
        m = re.match(r"([^=:]+?)\s*[=:]\s*(.*)$", raw)
        if not m:
            out[raw] = ""
            continue
        out[m.group(1)] = m.group(2)
    return out


def load_properties_file(path: str | Path) -> dict[str, str]:
    """
    Load a flat property map from a YAML (.yaml/.yml) or .properties file.

    Nested YAML mappings become dotted keys, so both of these are equivalent:

      stopwords:
        customList: [a, the]

      stopwords.customList=a,the

    An empty YAML file yields no properties; unparseable YAML or a top level
    that is not a mapping raises InvalidConfigFile.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigFileNotFound(str(path)) from err

    if p.suffix.lower() in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise InvalidConfigFile(str(path), f"YAML parse error: {err}") from err
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigFile(
                str(path), f"top level must be a mapping; got {type(data).__name__}"
            )
        return _flatten(data)
    return _parse_properties(text)


def _env_suffix(name: str) -> str:
    """CUSTOM_LIST_FILE_PATH -> customListFilePath"""
    head, *rest = name.lower().split("_")
    return head + "".join(part.capitalize() for part in rest)


def load_properties_from_env(
    prefix: str = ANNOTATOR_NAME,
    dotenv_path: str | Path | None = None,
) -> dict[str, str]:
    """
    Map environment variables such as STOPWORDS_CUSTOM_LIST to property keys
    such as stopwords.customList.

    A .env file (current directory by default) is loaded first without
    overriding variables already set in the process environment.
    """
    load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    env_prefix = prefix.upper() + "_"
    out: dict[str, str] = {}
    for name, value in os.environ.items():
        if not name.startswith(env_prefix) or len(name) == len(env_prefix):
            continue
        out[_key(prefix, _env_suffix(name[len(env_prefix) :]))] = value
    return out


def merge_properties(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge property layers; later layers win."""
    merged: dict[str, Any] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


__all__ = [
    "ANNOTATOR_NAME",
    "DEFAULT_STOP_POS_CATEGORIES",
    "RECOGNIZED_SUFFIXES",
    "StopwordConfig",
    "resolve_config",
    "load_properties_file",
    "load_properties_from_env",
    "merge_properties",
]
