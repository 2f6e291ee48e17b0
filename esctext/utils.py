"""Общие вспомогательные функции."""

from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T")


def sort_nullable(items: Optional[Iterable[Optional[T]]], nulls_first: bool = True) -> Optional[List[Optional[T]]]:
    """
    Сортирует элементы, допуская None.

    None собираются в начало (nulls_first=True) или в конец списка,
    остальные элементы сортируются естественным порядком.
    Для items=None возвращает None.
    """
    if items is None:
        return None
    values = list(items)
    nulls: List[Optional[T]] = [None] * sum(1 for v in values if v is None)
    rest = sorted(v for v in values if v is not None)  # type: ignore[type-var]
    return nulls + rest if nulls_first else rest + nulls


__all__ = ["sort_nullable"]
