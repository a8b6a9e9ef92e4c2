# tests/test_cli.py
from __future__ import annotations

import io
import json

import pytest

from stopword_annotator import cli

TSV = "The\tthe\tDT\ndogs\tdog\tNNS\n\nbarked\tbark\tVBD\nat\tat\tIN\n"


@pytest.fixture
def tsv_file(tmp_path):
    path = tmp_path / "tokens.tsv"
    path.write_text(TSV, encoding="utf-8")
    return path


def _rows(out: str) -> list[list[str]]:
    return [line.split("\t") for line in out.splitlines()]


def test_verdicts_are_printed(tsv_file, capsys):
    rc = cli.main(
        [
            str(tsv_file),
            "--no-env",
            "--set",
            "stopwords.customList=the",
            "--set",
            "stopwords.shorterThan=3",
        ]
    )
    out = capsys.readouterr().out

    assert rc == 0
    assert _rows(out) == [
        ["The", "the", "DT", "true"],
        ["dogs", "dog", "NNS", "false"],
        ["barked", "bark", "VBD", "false"],
        ["at", "at", "IN", "true"],
    ]


def test_explain_adds_reason_column(tsv_file, capsys):
    rc = cli.main(
        [
            str(tsv_file),
            "--no-env",
            "--explain",
            "--set",
            "stopwords.customList=dog",
            "--set",
            "stopwords.withPosCategories=DT,IN",
        ]
    )
    rows = _rows(capsys.readouterr().out)

    assert rc == 0
    assert [r[-1] for r in rows] == ["pos_category", "stopword", "", "pos_category"]


def test_unset_verdicts_without_stopword_source(tsv_file, capsys):
    rc = cli.main([str(tsv_file), "--no-env", "--set", "stopwords.shorterThan=3"])
    rows = _rows(capsys.readouterr().out)

    assert rc == 0
    assert {r[3] for r in rows} == {"-"}


def test_content_only_with_config_file(tsv_file, tmp_path, capsys):
    config = tmp_path / "stopwords.yaml"
    config.write_text(
        "stopwords:\n  customListResourcesFilePath: english-common-words.txt\n",
        encoding="utf-8",
    )
    rc = cli.main([str(tsv_file), "--no-env", "--config", str(config), "--content-only"])

    assert rc == 0
    assert capsys.readouterr().out.split() == ["dog", "bark"]


def test_overrides_win_over_config_file(tsv_file, tmp_path, capsys):
    config = tmp_path / "stopwords.properties"
    config.write_text("stopwords.customList=dog\n", encoding="utf-8")
    rc = cli.main(
        [
            str(tsv_file),
            "--no-env",
            "--config",
            str(config),
            "--set",
            "stopwords.customList=bark",
            "--content-only",
        ]
    )

    assert rc == 0
    assert capsys.readouterr().out.split() == ["the", "dog", "at"]


def test_jsonl_from_stdin(monkeypatch, capsys):
    lines = [
        {"word": "Was", "lemma": "be", "tag": "VBD"},
        {"word": "velvet", "lemma": "velvet", "tag": "NN"},
    ]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(json.dumps(x) for x in lines)))
    rc = cli.main(["-", "--format", "jsonl", "--no-env", "--set", "stopwords.customList=be"])

    assert rc == 0
    assert [r[3] for r in _rows(capsys.readouterr().out)] == ["true", "false"]


def test_environment_settings_are_used(tsv_file, monkeypatch, capsys):
    monkeypatch.chdir(tsv_file.parent)
    monkeypatch.setenv("STOPWORDS_CUSTOM_LIST", "bark")
    rc = cli.main([str(tsv_file), "--content-only"])

    assert rc == 0
    assert capsys.readouterr().out.split() == ["the", "dog", "at"]


@pytest.mark.parametrize(
    "override",
    [
        "stopwords.shorterThan=abc",
        "stopwords.checkOnlyLemmas=perhaps",
        "stopwords.customListFilePath=/definitely/not/here.txt",
        "stopwords.customListResourcesFilePath=missing.txt",
        "no-equals-sign",
    ],
)
def test_configuration_errors_exit_2(tsv_file, capsys, override):
    rc = cli.main([str(tsv_file), "--no-env", "--set", override])
    err = capsys.readouterr().err

    assert rc == 2
    assert err.startswith("[error]")


def test_malformed_tsv_exits_1(tmp_path, capsys):
    path = tmp_path / "bad.tsv"
    path.write_text("only-a-word\n", encoding="utf-8")
    rc = cli.main([str(path), "--no-env", "--set", "stopwords.customList=x"])

    assert rc == 1
    assert "line 1" in capsys.readouterr().err


def test_invalid_yaml_config_exits_2(tsv_file, tmp_path, capsys):
    config = tmp_path / "bad.yaml"
    config.write_text("stopwords: [unclosed\n", encoding="utf-8")
    rc = cli.main([str(tsv_file), "--no-env", "--config", str(config)])

    assert rc == 2
    assert capsys.readouterr().err.startswith("[error] Invalid configuration file")


@pytest.mark.parametrize("line", ["[1, 2]", '"word"', "42"])
def test_jsonl_line_that_is_not_an_object_exits_1(tmp_path, capsys, line):
    path = tmp_path / "tokens.jsonl"
    path.write_text(line + "\n", encoding="utf-8")
    rc = cli.main([str(path), "--format", "jsonl", "--no-env", "--set", "stopwords.customList=x"])

    assert rc == 1
    assert "line 1" in capsys.readouterr().err
