# tests/test_sources.py
from __future__ import annotations

import pytest

from stopword_annotator.exceptions import StopwordFileNotFound, StopwordResourceNotFound
from stopword_annotator.sources import (
    load_file,
    load_inline,
    load_resource,
    normalize_lines,
    split_csv,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        (" a , b ", ["a", "b"]),
        ("a,,b,", ["a", "b"]),
        ("", []),
    ],
)
def test_split_csv(raw, expected):
    assert split_csv(raw) == expected


def test_normalize_lines_skips_blanks_and_comments():
    words = normalize_lines(["  Stop  \n", "\n", "# comment\n", "WORDS", "stop"])
    assert words == {"stop", "words"}


def test_load_inline_lowercases_and_dedupes():
    assert load_inline("The,the, THE ,a") == {"the", "a"}


def test_file_round_trip_is_case_insensitive(tmp_path):
    path = tmp_path / "list.txt"
    path.write_text("STOP\nWords\nlist\n", encoding="utf-8")
    assert load_file(path) == {"stop", "words", "list"}


def test_relative_file_path_resolves_against_cwd(tmp_path, monkeypatch):
    (tmp_path / "rel.txt").write_text("alpha\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_file("rel.txt") == {"alpha"}


def test_missing_file_raises_with_path(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(StopwordFileNotFound) as ei:
        load_file(missing)
    assert ei.value.path == str(missing)
    assert isinstance(ei.value, OSError)
    assert isinstance(ei.value.__cause__, OSError)


def test_directory_is_not_a_stopword_file(tmp_path):
    with pytest.raises(StopwordFileNotFound):
        load_file(tmp_path)


def test_bundled_resource_is_lowercase_without_comments():
    words = load_resource("english-common-words.txt")
    assert {"the", "a", "and", "which", "would"} <= words
    assert all(w == w.lower() and w.strip() == w for w in words)
    assert not any(w.startswith("#") for w in words)


def test_resource_with_explicit_package():
    explicit = load_resource("stopword_annotator.resources:english-common-words.txt")
    assert explicit == load_resource("english-common-words.txt")


@pytest.mark.parametrize(
    "resource_path",
    [
        "no-such-list.txt",
        "no.such.package:list.txt",
        "stopword_annotator.resources:",
        "",
    ],
)
def test_missing_resource_raises_with_path(resource_path):
    with pytest.raises(StopwordResourceNotFound) as ei:
        load_resource(resource_path)
    assert ei.value.resource_path == resource_path
    assert resource_path in str(ei.value)


def test_file_and_resource_share_normalization(tmp_path):
    text = "  The\n# note\n\nAND\n"
    path = tmp_path / "list.txt"
    path.write_text(text, encoding="utf-8")
    assert load_file(path) == normalize_lines(text.splitlines()) == {"the", "and"}
