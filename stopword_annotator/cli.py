# stopword_annotator/cli.py
r"""
Mark stop tokens in pre-tagged text.

Input is one token per line, either TSV (word<TAB>lemma<TAB>tag) or JSONL
({"word": ..., "lemma": ..., "tag": ...}), as written by an upstream
tokenizer/tagger/lemmatizer.

Usage examples:
  stopword-annotator tokens.tsv --set stopwords.customList=the,a --set stopwords.shorterThan=3
  stopword-annotator tokens.jsonl --format jsonl --config stopwords.yaml --explain
  cat tokens.tsv | stopword-annotator - --content-only
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from .annotator import StopwordsAnnotator, content_lemmas, is_stopped
from .config import (
    ANNOTATOR_NAME,
    load_properties_file,
    load_properties_from_env,
    merge_properties,
)
from .engine import stop_reason
from .exceptions import StopwordConfigError
from .tokens import Document, document_from_records

log = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Mark stop tokens in pre-tagged text")
    p.add_argument("input", nargs="?", default="-", help="Token file (default: stdin)")
    p.add_argument("--format", choices=("tsv", "jsonl"), default="tsv", help="Input format")
    p.add_argument("--config", help="YAML or .properties file with annotator settings")
    p.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a property, e.g. stopwords.shorterThan=3 (repeatable)",
    )
    p.add_argument(
        "--prefix",
        default=ANNOTATOR_NAME,
        help=f"Annotator name / property prefix (default: {ANNOTATOR_NAME})",
    )
    p.add_argument("--no-env", action="store_true", help="Ignore environment and .env settings")
    out = p.add_mutually_exclusive_group()
    out.add_argument("--explain", action="store_true", help="Add the rule that stopped each token")
    out.add_argument(
        "--content-only", action="store_true", help="Print only lemmas of content tokens"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _parse_overrides(items: Sequence[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"--set expects KEY=VALUE; got {item!r}")
        out[key.strip()] = value
    return out


def _read_records(stream: TextIO, fmt: str) -> Iterator[tuple[str, str, str]]:
    for lineno, line in enumerate(stream, start=1):
        raw = line.rstrip("\n")
        if not raw.strip():
            continue
        if fmt == "jsonl":
            obj = json.loads(raw)
            if not isinstance(obj, dict):
                raise ValueError(f"line {lineno}: expected a JSON object; got {raw!r}")
            yield str(obj["word"]), str(obj["lemma"]), str(obj["tag"])
            continue
        parts = raw.split("\t")
        if len(parts) < 3:
            raise ValueError(f"line {lineno}: expected word<TAB>lemma<TAB>tag; got {raw!r}")
        yield parts[0], parts[1], parts[2]


def _load_document(path: str, fmt: str) -> Document:
    if path == "-":
        return document_from_records(list(_read_records(sys.stdin, fmt)))
    with open(path, encoding="utf-8") as f:
        return document_from_records(list(_read_records(f, fmt)))


def _verdict(value: bool | None) -> str:
    if value is None:
        return "-"
    return "true" if value else "false"


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        properties = merge_properties(
            load_properties_file(args.config) if args.config else None,
            None if args.no_env else load_properties_from_env(args.prefix),
            _parse_overrides(args.overrides),
        )
        annotator = StopwordsAnnotator.from_properties(properties, name=args.prefix)
    except (StopwordConfigError, ValueError) as err:
        print(f"[error] {err}", file=sys.stderr)
        return 2

    try:
        document = _load_document(args.input, args.format)
    except (OSError, ValueError, KeyError) as err:
        print(f"[error] cannot read tokens: {err}", file=sys.stderr)
        return 1

    annotator.annotate(document)

    if args.content_only:
        for lemma in content_lemmas(document, annotator.name):
            print(lemma)
        return 0

    for token in document.tokens:
        row = [token.word, token.lemma, token.tag, _verdict(is_stopped(token, annotator.name))]
        if args.explain:
            reason = None
            if is_stopped(token, annotator.name):
                reason = stop_reason(token, annotator.config)
            row.append(reason.value if reason else "")
        print("\t".join(row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
