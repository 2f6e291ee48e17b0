"""
Экранирование и разэкранирование строк.

Содержит примитив чётности (is_escaped) для поиска разделителей (search.py):
- серия escape-символов, заканчивающаяся прямо перед позицией, считается назад;
- если сам escape-символ экранируем, нечётная длина серии означает, что
  символ в позиции экранирован;
- если нет, достаточно одного escape-символа перед позицией.

unescape_string проходит строку один раз слева направо и не пересчитывает
серии escape-символов.
"""

from __future__ import annotations

from typing import Optional


def count_escapes_back(template: str, index: int, escape_symbol: str) -> int:
    """
    Длина серии escape-символов, заканчивающейся в позиции index (включительно).

    Если в позиции index не escape-символ (или index < 0), возвращает 0.
    """
    pos = index
    while pos >= 0 and template[pos] == escape_symbol:
        pos -= 1
    return index - pos


def is_escaped(template: str, index: int, escape_symbol: str, symbol_escaped: bool) -> bool:
    """
    Проверяет, экранирован ли символ в позиции index.

    Args:
        template: Строка, в которой выполняется проверка
        index: Позиция проверяемого символа
        escape_symbol: Escape-символ
        symbol_escaped: Может ли escape-символ экранировать сам себя

    Returns:
        True, если перед позицией стоит "действующий" escape-символ
    """
    if index <= 0 or template[index - 1] != escape_symbol:
        return False
    if not symbol_escaped:
        return True
    return count_escapes_back(template, index - 1, escape_symbol) % 2 == 1


def is_escapable(ch: str, escape_chars: Optional[str]) -> bool:
    """None means every character is escapable; "" means none is."""
    return escape_chars is None or ch in escape_chars


def escape_string(string: Optional[str], escape_chars: Optional[str], escape_symbol: str) -> Optional[str]:
    """
    Экранирует символы из escape_chars, добавляя перед ними escape_symbol.

    Строка проходится один раз, поэтому escape-символ может сам входить
    в escape_chars. При string/escape_chars равных None или "" строка
    возвращается как есть.
    """
    if not string or not escape_chars:
        return string
    chars = set(escape_chars)
    return "".join(escape_symbol + ch if ch in chars else ch for ch in string)


def unescape_string(string: Optional[str], escape_chars: Optional[str], escape_symbol: str) -> Optional[str]:
    """
    Удаляет escape-последовательности из строки.

    Args:
        string: Обрабатываемая строка
        escape_chars: Экранируемые символы. None - экранируется любой символ
            (включая сам escape-символ); "" - ничего не экранируется
        escape_symbol: Escape-символ

    Returns:
        Строка без escape-последовательностей. Завершающий одиночный
        escape-символ сохраняется.
    """
    if not string or escape_chars == "":
        return string

    out: list[str] = []
    pos = 0
    end = len(string)
    while pos < end:
        ch = string[pos]
        if ch == escape_symbol and pos + 1 < end and is_escapable(string[pos + 1], escape_chars):
            # symbol and the char it escapes are consumed together
            out.append(string[pos + 1])
            pos += 2
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


__all__ = [
    "count_escapes_back",
    "is_escaped",
    "is_escapable",
    "escape_string",
    "unescape_string",
]
