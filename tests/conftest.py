from __future__ import annotations

from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write_dialects


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path: Path):
    # dialect lookup must not see the developer's environment or cwd
    monkeypatch.delenv("ESCTEXT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def dialects_file(tmp_path: Path) -> Path:
    """esctext.yaml с пользовательским диалектом и переопределением встроенного."""
    return write_dialects(tmp_path, """
        dialects:
          pipes:
            title: "<a:1|b:2>"
            prefix: "<"
            suffix: ">"
            kv_separator: ":"
            entry_separator: "|"
            separator: "|"
          brackets:
            prefix: "("
            suffix: ")"
          literal:
            escape_chars: ""
            escape_symbol: '~'
    """)
