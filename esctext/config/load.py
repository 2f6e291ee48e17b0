"""
Загрузчик диалектов из YAML.

Встроенные диалекты доступны всегда; диалекты из файла
перекрывают встроенные с тем же именем.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import Dialect, DialectConfigError
from .paths import resolve_config_path

_LOG = logging.getLogger("esctext.config")

_yaml = YAML(typ="safe")

BUILTIN_DIALECTS: Dict[str, Dialect] = {
    "brackets": Dialect(
        name="brackets",
        title="[key=value, key=value]",
    ),
    "braces": Dialect(
        name="braces",
        title="{key: value, key: value}",
        prefix="{",
        suffix="}",
        kv_separator=": ",
    ),
    "plain": Dialect(
        name="plain",
        title="key=value key=value",
        prefix="",
        suffix="",
        entry_separator=" ",
        separator=" ",
    ),
}


def _read_yaml_map(path: Path) -> dict:
    """Читает YAML файл и возвращает словарь."""
    if not path.is_file():
        raise DialectConfigError(f"Dialect file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise DialectConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise DialectConfigError(f"YAML must be a mapping: {path}")
    return raw


def read_dialects_file(path: Path) -> Dict[str, Dialect]:
    """Загружает диалекты из одного файла (ключ верхнего уровня dialects:)."""
    raw = _read_yaml_map(path)
    section = raw.get("dialects") or {}
    if not isinstance(section, dict):
        raise DialectConfigError(f"{path}: 'dialects' must be a mapping")

    result: Dict[str, Dialect] = {}
    for name, data in section.items():
        result[str(name)] = Dialect.from_dict(str(name), data or {})
    _LOG.debug("loaded %d dialect(s) from %s", len(result), path)
    return result


def load_dialects(path: Optional[Path] = None, root: Optional[Path] = None) -> Dict[str, Dialect]:
    """
    Встроенные диалекты + диалекты из файла конфигурации.

    Args:
        path: Явный путь к файлу диалектов
        root: Каталог, в котором ищется esctext.yaml (по умолчанию cwd)

    Returns:
        Словарь name -> Dialect
    """
    dialects = dict(BUILTIN_DIALECTS)
    cfg = resolve_config_path(path, root)
    if cfg is None:
        return dialects

    for name, dialect in read_dialects_file(cfg).items():
        if name in dialects:
            _LOG.info("dialect '%s' from %s overrides the built-in one", name, cfg)
        dialects[name] = dialect
    return dialects


def get_dialect(name: str, path: Optional[Path] = None, root: Optional[Path] = None) -> Dialect:
    dialects = load_dialects(path, root)
    try:
        return dialects[name]
    except KeyError:
        raise DialectConfigError(
            f"Unknown dialect '{name}'. Available: {', '.join(sorted(dialects))}"
        ) from None


def list_dialects(path: Optional[Path] = None, root: Optional[Path] = None) -> List[str]:
    return sorted(load_dialects(path, root))


__all__ = [
    "BUILTIN_DIALECTS",
    "read_dialects_file",
    "load_dialects",
    "get_dialect",
    "list_dialects",
]
