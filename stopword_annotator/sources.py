from __future__ import annotations

import logging
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Literal

from .exceptions import StopwordFileNotFound, StopwordResourceNotFound

log = logging.getLogger(__name__)

StopwordSource = Literal["inline", "file", "resource"]

# Package that holds the lists shipped with the annotator
BUNDLED_RESOURCE_PACKAGE = "stopword_annotator.resources"


def split_csv(raw: str) -> list[str]:
    """Split a comma list, trimming each element and dropping empties."""
    return [tok for tok in (t.strip() for t in raw.split(",")) if tok]


def normalize_lines(lines: Iterable[str]) -> frozenset[str]:
    """
    Turn raw stopword lines into a lowercase set.

    - One token per line.
    - Lines starting with '#' or blank lines are ignored.
    - Surrounding whitespace is stripped.

    The same policy applies to file and bundled-resource sources.
    """
    words: set[str] = set()
    for line in lines:
        raw = line.strip()
        if not raw or raw.startswith("#"):
            continue
        words.add(raw.lower())
    return frozenset(words)


def load_inline(raw: str) -> frozenset[str]:
    return frozenset(tok.lower() for tok in split_csv(raw))


def load_file(path: str | Path) -> frozenset[str]:
    """
    Load stopwords from a newline-delimited file.

    Relative paths resolve against the current working directory.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            words = normalize_lines(f)
    except OSError as err:
        raise StopwordFileNotFound(str(path)) from err
    log.debug("Loaded %d stopwords from file %s", len(words), p)
    return words


def _split_resource_path(resource_path: str) -> tuple[str, list[str]]:
    """
    "pkg.module:dir/list.txt" -> ("pkg.module", ["dir", "list.txt"])
    "list.txt"                -> (BUNDLED_RESOURCE_PACKAGE, ["list.txt"])
    """
    package, sep, rel = resource_path.partition(":")
    if not sep:
        package, rel = BUNDLED_RESOURCE_PACKAGE, resource_path
    parts = [p for p in rel.replace("\\", "/").split("/") if p]
    return package.strip(), parts


def load_resource(resource_path: str) -> frozenset[str]:
    """
    Load stopwords from a resource bundled inside an importable package.

    A bare relative path is looked up in stopword_annotator.resources; prefix it
    with "some.package:" to read from another installed package.
    """
    package, parts = _split_resource_path(resource_path)
    if not package or not parts:
        raise StopwordResourceNotFound(resource_path)

    try:
        node = resources.files(package)
    except (ModuleNotFoundError, TypeError) as err:
        raise StopwordResourceNotFound(resource_path) from err

    for part in parts:
        node = node.joinpath(part)

    if not node.is_file():
        raise StopwordResourceNotFound(resource_path)

    try:
        text = node.read_text(encoding="utf-8")
    except OSError as err:
        raise StopwordResourceNotFound(resource_path) from err

    words = normalize_lines(text.splitlines())
    log.debug("Loaded %d stopwords from resource %s", len(words), resource_path)
    return words


__all__ = [
    "BUNDLED_RESOURCE_PACKAGE",
    "StopwordSource",
    "split_csv",
    "normalize_lines",
    "load_inline",
    "load_file",
    "load_resource",
]
