"""
Property lists: flat [key, value, key, value, ...] sequences.

This is the canonical intermediate form of the map codec. Keys sit at even
indices and their values at the following odd index.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from .errors import invalid_argument, null_argument


def check_even(properties: Sequence[Optional[str]]) -> None:
    if len(properties) % 2 != 0:
        raise invalid_argument(f"property list length {len(properties)} % 2 != 0")


def properties_to_map(*properties: Optional[str]) -> Optional[Dict[str, Optional[str]]]:
    """
    Build a key-ordered dict from a property list.

    ``properties_to_map(None)`` returns None. Repeated keys silently take
    the last value. Values may be None, keys may not.
    """
    if len(properties) == 1 and properties[0] is None:
        return None
    check_even(properties)

    result: Dict[str, Optional[str]] = {}
    for i in range(0, len(properties), 2):
        key = properties[i]
        if key is None:
            raise null_argument(f"key at index {i} (value={properties[i + 1]!r})")
        result[key] = properties[i + 1]
    return dict(sorted(result.items()))


def map_to_properties(mapping: Optional[Mapping[str, Optional[str]]]) -> Optional[List[Optional[str]]]:
    """Flatten a mapping into a property list, in the mapping's own order."""
    if mapping is None:
        return None
    properties: List[Optional[str]] = []
    for key, value in mapping.items():
        properties.append(key)
        properties.append(value)
    return properties


__all__ = ["check_even", "properties_to_map", "map_to_properties"]
