"""
esctext: escape-aware delimited text codec.

Escapes and unescapes strings, finds unescaped delimiters and converts
mappings and sequences to and from single-line delimited strings.
"""

from __future__ import annotations

from .codec import (
    array_to_string,
    map_to_string,
    properties_to_string,
    string_to_array,
    string_to_map,
)
from .errors import CodecError, ErrorKind, EscTextUserError
from .escaping import escape_string, is_escaped, unescape_string
from .properties import map_to_properties, properties_to_map
from .search import next_index_of, next_index_of_char

__all__ = [
    "CodecError",
    "ErrorKind",
    "EscTextUserError",
    "escape_string",
    "unescape_string",
    "is_escaped",
    "next_index_of",
    "next_index_of_char",
    "properties_to_map",
    "map_to_properties",
    "properties_to_string",
    "map_to_string",
    "string_to_map",
    "array_to_string",
    "string_to_array",
]
