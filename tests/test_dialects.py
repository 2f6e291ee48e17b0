"""
Tests for dialect loading from esctext.yaml.
"""

from pathlib import Path

import pytest

from esctext.config import (
    BUILTIN_DIALECTS,
    CONFIG_ENV,
    Dialect,
    DialectConfigError,
    get_dialect,
    list_dialects,
    load_dialects,
)
from tests.infrastructure import write, write_dialects


def test_builtins_without_file(tmp_path: Path):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert load_dialects(root=empty) == BUILTIN_DIALECTS
    assert list_dialects(root=empty) == ["braces", "brackets", "plain"]


def test_file_adds_and_overrides(dialects_file: Path):
    dialects = load_dialects(dialects_file)
    assert set(dialects) == {"brackets", "braces", "plain", "pipes", "literal"}

    brackets = dialects["brackets"]
    assert (brackets.prefix, brackets.suffix) == ("(", ")")
    # unspecified fields fall back to the defaults, not to the built-in dialect
    assert brackets.kv_separator == "="
    assert brackets.title == ""

    assert dialects["braces"] is BUILTIN_DIALECTS["braces"]


def test_file_found_in_cwd(dialects_file: Path):
    assert "pipes" in list_dialects()


def test_file_found_in_root(dialects_file: Path, tmp_path: Path, monkeypatch):
    other = tmp_path / "elsewhere"
    other.mkdir()
    monkeypatch.chdir(other)
    assert "pipes" not in list_dialects()
    assert "pipes" in list_dialects(root=tmp_path)


def test_env_variable(tmp_path: Path, monkeypatch):
    cfg = write_dialects(tmp_path / "cfg", """
        dialects:
          semi:
            entry_separator: ";"
    """, name="custom.yaml")
    monkeypatch.setenv(CONFIG_ENV, str(cfg))
    assert get_dialect("semi").entry_separator == ";"


def test_explicit_path_wins_over_env(dialects_file: Path, tmp_path: Path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "missing.yaml"))
    assert get_dialect("pipes", dialects_file).prefix == "<"


def test_derived_escape_chars(dialects_file: Path):
    pipes = get_dialect("pipes", dialects_file)
    assert pipes.escape_chars is None
    assert pipes.effective_escape_chars == "<>:|\\"
    assert BUILTIN_DIALECTS["brackets"].effective_escape_chars == "[]=,\\"
    assert BUILTIN_DIALECTS["plain"].effective_escape_chars == "= \\"


def test_explicit_empty_escape_chars(dialects_file: Path):
    literal = get_dialect("literal", dialects_file)
    assert literal.effective_escape_chars == ""
    assert literal.escape_symbol == "~"
    assert literal.escape("a, b") == "a, b"


def test_title_matches_encoding(dialects_file: Path):
    pipes = get_dialect("pipes", dialects_file)
    assert pipes.encode_map({"a": "1", "b": "2"}) == pipes.title
    assert pipes.decode_map(pipes.title) == ("", {"a": "1", "b": "2"})


def test_unknown_dialect(dialects_file: Path):
    with pytest.raises(DialectConfigError) as ei:
        get_dialect("nope", dialects_file)
    assert "Unknown dialect 'nope'" in str(ei.value)
    assert "pipes" in str(ei.value)


@pytest.mark.parametrize(
    "yaml_text,fragment",
    [
        ("dialects:\n  bad:\n    colour: red\n", "unknown keys ['colour']"),
        ("dialects:\n  bad:\n    prefix: 1\n", "dialects.bad.prefix: expected a string"),
        ("dialects:\n  bad:\n    escape_symbol: ab\n", "dialects.bad.escape_symbol"),
        ("dialects:\n  bad:\n    separator: ''\n", "dialects.bad.separator: must not be empty"),
        ("dialects:\n  bad: [1, 2]\n", "dialects.bad: expected a mapping"),
        ("dialects: [a, b]\n", "'dialects' must be a mapping"),
        ("- a\n- b\n", "YAML must be a mapping"),
        ("dialects: [unclosed\n", "Invalid YAML"),
    ],
)
def test_invalid_files(tmp_path: Path, yaml_text: str, fragment: str):
    cfg = write(tmp_path / "bad.yaml", yaml_text)
    with pytest.raises(DialectConfigError) as ei:
        load_dialects(cfg)
    assert fragment in str(ei.value)


def test_missing_explicit_file(tmp_path: Path):
    with pytest.raises(DialectConfigError, match="not found"):
        load_dialects(tmp_path / "nope.yaml")


def test_empty_file(tmp_path: Path):
    cfg = write(tmp_path / "esctext.yaml", "")
    assert load_dialects(cfg) == BUILTIN_DIALECTS


def test_dict_round_trip():
    for name, dialect in BUILTIN_DIALECTS.items():
        assert Dialect.from_dict(name, dialect.to_dict()) == dialect


def test_dialect_validation():
    with pytest.raises(DialectConfigError):
        Dialect(name="x", kv_separator="")
    with pytest.raises(DialectConfigError):
        Dialect(name="x", escape_symbol="")
    assert isinstance(DialectConfigError("x"), ValueError)
