from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Dialect, get_dialect, load_dialects
from .errors import EscTextUserError
from .escaping import escape_string, unescape_string
from .jsonic import dumps as jdumps, loads as jloads
from .logs import setup_logging_once
from .search import next_index_of, next_index_of_char
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="esctext",
        description="Escape-aware delimited text codec",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="файл диалектов (по умолчанию $ESCTEXT_CONFIG или ./esctext.yaml)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # Настройки экранирования: диалект + явные переопределения
    def add_escape_opts(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("-d", "--dialect", default="brackets", help="имя диалекта (по умолчанию brackets)")
        sp.add_argument("--chars", default=None, help="экранируемые символы (перекрывают диалект)")
        sp.add_argument(
            "--any",
            action="store_true",
            help="любой символ после escape-символа считается экранированным",
        )
        sp.add_argument("--symbol", default=None, help="escape-символ (перекрывает диалект)")

    def add_delimiter_opts(sp: argparse.ArgumentParser) -> None:
        add_escape_opts(sp)
        sp.add_argument("--prefix", default=None)
        sp.add_argument("--suffix", default=None)
        sp.add_argument("--kv-sep", dest="kv_separator", default=None)
        sp.add_argument("--entry-sep", dest="entry_separator", default=None)
        sp.add_argument("--sep", dest="separator", default=None)

    text_help = "строка, @file для чтения из файла или - для чтения из stdin"

    sp = sub.add_parser("escape", help="экранировать строку")
    sp.add_argument("text", help=text_help)
    add_escape_opts(sp)

    sp = sub.add_parser("unescape", help="снять экранирование")
    sp.add_argument("text", help=text_help)
    add_escape_opts(sp)

    sp = sub.add_parser("find", help="индекс следующего неэкранированного вхождения (JSON)")
    sp.add_argument("template", help=text_help)
    sp.add_argument("key")
    sp.add_argument("--start", type=int, default=0)
    sp.add_argument(
        "--char",
        action="store_true",
        help="искать одиночный символ; escape-символ экранируем, если входит в --chars",
    )
    add_escape_opts(sp)

    sp = sub.add_parser("encode-map", help="JSON-объект → строка")
    sp.add_argument("json", help=text_help)
    sp.add_argument("--name", default=None)
    add_delimiter_opts(sp)

    sp = sub.add_parser("decode-map", help="строка → JSON {name, entries}")
    sp.add_argument("text", help=text_help)
    add_delimiter_opts(sp)

    sp = sub.add_parser("encode-array", help="JSON-массив → строка")
    sp.add_argument("json", help=text_help)
    add_delimiter_opts(sp)

    sp = sub.add_parser("decode-array", help="строка → JSON {elements}")
    sp.add_argument("text", help=text_help)
    add_delimiter_opts(sp)

    sub.add_parser("dialects", help="список доступных диалектов (JSON)")

    return p


def _read_arg(value: str) -> str:
    """
    Поддерживает три формата:
    - Прямая строка
    - Из файла: @path/to/file.txt (завершающий перевод строки отбрасывается)
    - Из stdin: -
    """
    if value == "-":
        return sys.stdin.read().rstrip("\n")
    if value.startswith("@"):
        file_path = Path(value[1:])
        if not file_path.is_file():
            raise ValueError(f"Input file not found: {file_path}")
        return file_path.read_text(encoding="utf-8").rstrip("\n")
    return value


def _dialect(ns: argparse.Namespace) -> Dialect:
    """Диалект из конфигурации с учётом переопределений из командной строки."""
    base = get_dialect(ns.dialect, ns.config)
    overrides: Dict[str, Any] = {}
    for attr in ("prefix", "suffix", "kv_separator", "entry_separator", "separator"):
        value = getattr(ns, attr, None)
        if value is not None:
            overrides[attr] = value
    if ns.chars is not None:
        overrides["escape_chars"] = ns.chars
    if ns.symbol is not None:
        overrides["escape_symbol"] = ns.symbol
    return dataclasses.replace(base, **overrides) if overrides else base


def _emit(text: str) -> None:
    sys.stdout.write(text + "\n")


def _escape_chars(ns: argparse.Namespace, dialect: Dialect) -> Optional[str]:
    return None if ns.any else dialect.effective_escape_chars


def main(argv: list[str] | None = None) -> int:
    setup_logging_once()
    ns = _build_parser().parse_args(argv)

    try:
        if ns.cmd == "dialects":
            data = {name: d.to_dict() for name, d in sorted(load_dialects(ns.config).items())}
            _emit(jdumps({"dialects": data}))
            return 0

        dialect = _dialect(ns)
        chars = _escape_chars(ns, dialect)
        symbol = dialect.escape_symbol

        if ns.cmd == "escape":
            _emit(escape_string(_read_arg(ns.text), chars, symbol) or "")
            return 0

        if ns.cmd == "unescape":
            _emit(unescape_string(_read_arg(ns.text), chars, symbol) or "")
            return 0

        if ns.cmd == "find":
            template = _read_arg(ns.template)
            if ns.char:
                symbol_escaped = chars is None or symbol in chars
                index = next_index_of_char(template, ns.key, ns.start, symbol, symbol_escaped)
            else:
                index = next_index_of(template, ns.key, ns.start, chars, symbol)
            _emit(jdumps({"index": index}))
            return 0

        if ns.cmd == "encode-map":
            obj = jloads(_read_arg(ns.json))
            if not isinstance(obj, dict):
                raise ValueError("encode-map expects a JSON object")
            mapping = {str(k): (None if v is None else str(v)) for k, v in obj.items()}
            _emit(dialect.encode_map(mapping, name=ns.name))
            return 0

        if ns.cmd == "decode-map":
            name, entries = dialect.decode_map(_read_arg(ns.text))
            _emit(jdumps({"name": name, "entries": dict(entries)}))
            return 0

        if ns.cmd == "encode-array":
            arr = jloads(_read_arg(ns.json))
            if not isinstance(arr, list):
                raise ValueError("encode-array expects a JSON array")
            _emit(dialect.encode_array([("" if v is None else str(v)) for v in arr]))
            return 0

        if ns.cmd == "decode-array":
            _emit(jdumps({"elements": dialect.decode_array(_read_arg(ns.text))}))
            return 0

    except (EscTextUserError, ValueError) as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
