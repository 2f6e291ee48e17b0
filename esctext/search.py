"""
Поиск неэкранированных вхождений символа или подстроки.

Аналог str.find(), который пропускает вхождения, экранированные
escape-символом. Работает напрямую по символам шаблона, используя
примитив чётности из escaping.py.
"""

from __future__ import annotations

from typing import Optional

from .errors import invalid_argument, null_argument
from .escaping import is_escapable, is_escaped


def next_index_of_char(
    template: str,
    key: str,
    start: int,
    escape_symbol: str,
    symbol_escaped: bool,
) -> int:
    """
    Находит следующее неэкранированное вхождение символа key.

    Сам key всегда считается экранируемым.

    Args:
        template: Строка поиска
        key: Искомый символ (ровно один)
        start: Позиция начала поиска; отрицательная приводится к 0
        escape_symbol: Escape-символ
        symbol_escaped: Может ли escape-символ экранировать сам себя. Если да,
            чётная серия escape-символов не влияет на следующий символ; если
            нет, учитывается только последний символ серии

    Returns:
        Индекс первого подходящего вхождения не раньше start, или -1

    Raises:
        CodecError: NULL_ARGUMENT для None, INVALID_ARGUMENT если key не один символ
    """
    if template is None:
        raise null_argument("template")
    if key is None:
        raise null_argument("key")
    if len(key) != 1:
        raise invalid_argument(f"key must be a single character, got {key!r}")

    index = max(start, 0)
    while True:
        index = template.find(key, index)
        if index < 0:
            return -1
        if not is_escaped(template, index, escape_symbol, symbol_escaped):
            return index
        index += 1


def next_index_of(
    template: str,
    key: str,
    start: int,
    escape_chars: Optional[str],
    escape_symbol: str,
) -> int:
    """
    Находит следующее неэкранированное вхождение подстроки key.

    Вхождение считается экранированным, только если экранируем первый символ
    key и перед ним стоит действующий escape-символ. При escape_chars=None
    экранируемы все символы, при escape_chars="" ни одно вхождение не
    считается экранированным.

    Пустой key совпадает сразу в позиции max(0, start), если она не
    выходит за длину шаблона.

    Raises:
        CodecError: NULL_ARGUMENT если template или key равны None
    """
    if template is None:
        raise null_argument("template")
    if key is None:
        raise null_argument("key")

    index = max(start, 0)
    if not key:
        return index if index <= len(template) else -1

    # escape state only matters for keys that start with an escapable char
    if not is_escapable(key[0], escape_chars):
        return template.find(key, index)

    symbol_escaped = is_escapable(escape_symbol, escape_chars)
    while True:
        index = template.find(key, index)
        if index < 0:
            return -1
        if not is_escaped(template, index, escape_symbol, symbol_escaped):
            return index
        index += 1


__all__ = ["next_index_of", "next_index_of_char"]
