"""
Модель диалекта: именованный набор разделителей и настроек экранирования.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple

from ..codec import (
    array_to_string,
    map_to_string,
    string_to_array,
    string_to_map,
)
from ..errors import EscTextUserError
from ..escaping import escape_string, unescape_string


class DialectConfigError(EscTextUserError, ValueError):
    """Ошибка описания диалекта с указанием пути поля."""
    pass


@dataclass(frozen=True)
class Dialect:
    """
    Диалект однострочного формата.

    Attributes:
        name: Имя диалекта (ключ в YAML)
        title: Человекочитаемое описание
        prefix, suffix: Обрамление коллекции
        kv_separator: Разделитель ключа и значения
        entry_separator: Разделитель записей словаря
        separator: Разделитель элементов массива
        escape_chars: Экранируемые символы. None - вывести автоматически
            из первых символов разделителей и escape-символа
        escape_symbol: Escape-символ (ровно один символ)
    """
    name: str
    title: str = ""
    prefix: str = "["
    suffix: str = "]"
    kv_separator: str = "="
    entry_separator: str = ", "
    separator: str = ", "
    escape_chars: Optional[str] = None
    escape_symbol: str = "\\"

    def __post_init__(self) -> None:
        if len(self.escape_symbol) != 1:
            raise DialectConfigError(
                f"dialects.{self.name}.escape_symbol: expected a single character, got {self.escape_symbol!r}"
            )
        for attr in ("kv_separator", "entry_separator", "separator"):
            if not getattr(self, attr):
                raise DialectConfigError(f"dialects.{self.name}.{attr}: must not be empty")

    @property
    def effective_escape_chars(self) -> str:
        if self.escape_chars is not None:
            return self.escape_chars
        # first chars are enough: an occurrence only counts as escaped through its first char
        seen: List[str] = []
        for delimiter in (self.prefix, self.suffix, self.kv_separator,
                          self.entry_separator, self.separator, self.escape_symbol):
            if delimiter and delimiter[0] not in seen:
                seen.append(delimiter[0])
        return "".join(seen)

    # ---- codec shortcuts ----

    def escape(self, text: Optional[str]) -> Optional[str]:
        return escape_string(text, self.effective_escape_chars, self.escape_symbol)

    def unescape(self, text: Optional[str]) -> Optional[str]:
        return unescape_string(text, self.effective_escape_chars, self.escape_symbol)

    def encode_map(self, mapping: Optional[Mapping[str, Optional[str]]], name: Optional[str] = None) -> str:
        return map_to_string(
            name, mapping, self.prefix, self.suffix,
            self.kv_separator, self.entry_separator,
            self.effective_escape_chars, self.escape_symbol,
        )

    def decode_map(
        self,
        text: str,
        mapping: Optional[MutableMapping[str, str]] = None,
    ) -> Tuple[str, MutableMapping[str, str]]:
        """Возвращает (имя, словарь). Если mapping не передан, создаётся новый dict."""
        target: MutableMapping[str, str] = {} if mapping is None else mapping
        name = string_to_map(
            text, target, self.prefix, self.suffix,
            self.kv_separator, self.entry_separator,
            self.effective_escape_chars, self.escape_symbol,
        )
        return name, target

    def encode_array(self, elements: Optional[List[str]]) -> str:
        return array_to_string(
            elements, self.prefix, self.separator, self.suffix,
            self.effective_escape_chars, self.escape_symbol,
        )

    def decode_array(self, text: str) -> List[str]:
        return string_to_array(
            text, self.prefix, self.separator, self.suffix,
            self.effective_escape_chars, self.escape_symbol,
        )

    # ---- YAML ----

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> "Dialect":
        """Создание экземпляра из словаря (из YAML)."""
        if not isinstance(data, Mapping):
            raise DialectConfigError(f"dialects.{name}: expected a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)} - {"name"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise DialectConfigError(f"dialects.{name}: unknown keys {unknown}")

        values: Dict[str, Any] = {}
        for key, raw in data.items():
            if raw is None and key == "escape_chars":
                values[key] = None
                continue
            if not isinstance(raw, str):
                raise DialectConfigError(
                    f"dialects.{name}.{key}: expected a string, got {type(raw).__name__}"
                )
            values[key] = raw
        return cls(name=name, **values)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь для YAML/JSON."""
        result: Dict[str, Any] = {
            "prefix": self.prefix,
            "suffix": self.suffix,
            "kv_separator": self.kv_separator,
            "entry_separator": self.entry_separator,
            "separator": self.separator,
            "escape_chars": self.escape_chars,
            "escape_symbol": self.escape_symbol,
        }
        if self.title:
            result["title"] = self.title
        return result


__all__ = ["Dialect", "DialectConfigError"]
