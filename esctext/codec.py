"""
Кодек коллекций в однострочный текст с разделителями.

Формат для словарей:
    <name><prefix><key><kv_separator><value><entry_separator>...<suffix>

Формат для массивов:
    <prefix><element><separator><element>...<suffix>

Имя, ключи, значения и элементы экранируются (escaping.py), разделители
вставляются как есть. При разборе разделители ищутся только среди
неэкранированных вхождений (search.py), всегда слева направо.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, MutableMapping, Optional, Sequence, Tuple

from .errors import invalid_argument, malformed_input, null_argument
from .escaping import escape_string, unescape_string
from .properties import check_even
from .search import next_index_of

_LOG = logging.getLogger("esctext.codec")

DEFAULT_SEPARATOR = " "
DEFAULT_ESCAPE_SYMBOL = "\\"


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def _assemble(
    name: Optional[str],
    tokens: Iterable[str],
    separator: str,
    prefix: Optional[str],
    suffix: Optional[str],
    escape_chars: Optional[str],
    escape_symbol: str,
) -> str:
    parts: List[str] = []
    if name:
        parts.append(escape_string(name, escape_chars, escape_symbol))
    if prefix:
        parts.append(prefix)
    parts.append(separator.join(tokens))
    if suffix:
        parts.append(suffix)
    return "".join(parts)


def _encode_pairs(
    pairs: Iterable[Tuple[str, Optional[str]]],
    kv_separator: str,
    escape_chars: Optional[str],
    escape_symbol: str,
) -> Iterable[str]:
    for key, value in pairs:
        if key is None:
            raise null_argument(f"key (value={value!r})")
        # None values are written as empty strings
        yield (
            escape_string(key, escape_chars, escape_symbol)
            + kv_separator
            + escape_string(value or "", escape_chars, escape_symbol)
        )


def map_to_string(
    name: Optional[str],
    mapping: Optional[Mapping[str, Optional[str]]],
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    kv_separator: Optional[str] = None,
    entry_separator: Optional[str] = None,
    escape_chars: Optional[str] = None,
    escape_symbol: str = DEFAULT_ESCAPE_SYMBOL,
) -> str:
    """
    Converts a mapping into a single-line string.

    Entries are written in the mapping's own iteration order. The name, keys
    and values have every character of ``escape_chars`` escaped; the prefix,
    suffix and separators are inserted verbatim, so they should normally be
    covered by ``escape_chars`` too.

    Args:
        name: Leading name. Omitted if None or empty.
        mapping: Entries to write. None or empty writes only name+prefix+suffix.
        prefix: Text before the first entry. Omitted if None or empty.
        suffix: Text after the last entry. Omitted if None or empty.
        kv_separator: Between key and value. Defaults to a single space if None.
        entry_separator: Between entries. Defaults to a single space if None.
        escape_chars: Characters to escape. No escaping if None or empty.
        escape_symbol: Symbol inserted before escaped characters.

    Returns:
        The encoded string (never None).
    """
    kv_sep = DEFAULT_SEPARATOR if kv_separator is None else kv_separator
    entry_sep = DEFAULT_SEPARATOR if entry_separator is None else entry_separator
    pairs = mapping.items() if mapping else ()
    return _assemble(
        name,
        _encode_pairs(pairs, kv_sep, escape_chars, escape_symbol),
        entry_sep,
        prefix,
        suffix,
        escape_chars,
        escape_symbol,
    )


def properties_to_string(
    name: Optional[str],
    properties: Optional[Sequence[Optional[str]]],
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    kv_separator: Optional[str] = None,
    entry_separator: Optional[str] = None,
    escape_chars: Optional[str] = None,
    escape_symbol: str = DEFAULT_ESCAPE_SYMBOL,
) -> str:
    """
    Same as map_to_string, but reads entries from a property list.

    Raises:
        CodecError: INVALID_ARGUMENT if the list has an odd number of elements.
    """
    if properties is not None:
        check_even(properties)
    kv_sep = DEFAULT_SEPARATOR if kv_separator is None else kv_separator
    entry_sep = DEFAULT_SEPARATOR if entry_separator is None else entry_separator
    pairs = zip(properties[0::2], properties[1::2]) if properties else ()
    return _assemble(
        name,
        _encode_pairs(pairs, kv_sep, escape_chars, escape_symbol),
        entry_sep,
        prefix,
        suffix,
        escape_chars,
        escape_symbol,
    )


def array_to_string(
    elements: Optional[Sequence[str]],
    prefix: Optional[str] = None,
    separator: Optional[str] = None,
    suffix: Optional[str] = None,
    escape_chars: Optional[str] = None,
    escape_symbol: str = DEFAULT_ESCAPE_SYMBOL,
) -> str:
    """Converts a sequence into a single-line string (see map_to_string)."""
    sep = DEFAULT_SEPARATOR if separator is None else separator
    tokens = (escape_string(e or "", escape_chars, escape_symbol) for e in elements or ())
    return _assemble(None, tokens, sep, prefix, suffix, escape_chars, escape_symbol)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _require(**arguments: Optional[str]) -> None:
    for arg_name, value in arguments.items():
        if value is None:
            raise null_argument(arg_name)


def _carve(
    string: str,
    prefix: str,
    suffix: str,
    escape_chars: Optional[str],
    escape_symbol: str,
) -> Tuple[str, str]:
    """
    Разрезает строку на (имя, тело) по первому неэкранированному префиксу
    и неэкранированному суффиксу в самом конце строки.
    """
    prefix_index = next_index_of(string, prefix, 0, escape_chars, escape_symbol)
    if prefix_index < 0:
        raise malformed_input("prefix missing")
    body_start = prefix_index + len(prefix)

    if suffix:
        suffix_index = next_index_of(string, suffix, len(string) - len(suffix), escape_chars, escape_symbol)
        if suffix_index < 0:
            raise malformed_input("suffix missing")
    else:
        suffix_index = len(string)
    if suffix_index < body_start:
        raise malformed_input("suffix overlaps prefix")

    return string[:prefix_index], string[body_start:suffix_index]


def _split(body: str, separator: str, escape_chars: Optional[str], escape_symbol: str) -> List[str]:
    """Splits on unescaped separators, leftmost match first."""
    parts: List[str] = []
    prev = 0
    while True:
        index = next_index_of(body, separator, prev, escape_chars, escape_symbol)
        if index < 0:
            break
        parts.append(body[prev:index])
        prev = index + len(separator)
    parts.append(body[prev:])
    return parts


def _parse_entry(
    entry: str,
    kv_separator: str,
    escape_chars: Optional[str],
    escape_symbol: str,
) -> Tuple[str, str]:
    # only the first unescaped separator counts, the value may contain more
    index = next_index_of(entry, kv_separator, 0, escape_chars, escape_symbol)
    if index < 0:
        raise malformed_input(f"missing key-value separator in entry {entry!r}")
    key = unescape_string(entry[:index], escape_chars, escape_symbol)
    value = unescape_string(entry[index + len(kv_separator):], escape_chars, escape_symbol)
    return key, value


def string_to_map(
    string: str,
    mapping: Optional[MutableMapping[str, str]],
    prefix: str,
    suffix: str,
    kv_separator: str,
    entry_separator: str,
    escape_chars: Optional[str] = None,
    escape_symbol: str = DEFAULT_ESCAPE_SYMBOL,
) -> str:
    """
    Parses a string produced by map_to_string.

    Args:
        string: Text to decode. May be empty only if prefix and suffix are both empty.
        mapping: Destination for the decoded entries. Existing keys are
            overwritten; it is only touched after the whole string parsed.
            If None, only the name is extracted.
        prefix: Text separating the name from the entries (not escaped).
        suffix: Text terminating the string (not escaped).
        kv_separator: Separator between keys and values, non-empty.
        entry_separator: Separator between entries, non-empty.
        escape_chars: Characters that may be escaped. None means any character
            following the escape symbol is escaped; "" means nothing is.
        escape_symbol: Escape symbol.

    Returns:
        The unescaped name, or "" if the string starts with the prefix.

    Raises:
        CodecError: NULL_ARGUMENT, INVALID_ARGUMENT or MALFORMED_INPUT.
    """
    _require(
        input=string,
        prefix=prefix,
        suffix=suffix,
        kv_separator=kv_separator,
        entry_separator=entry_separator,
    )
    if not string:
        if not prefix and not suffix:
            return ""
        raise invalid_argument("input string empty")
    if not entry_separator:
        raise invalid_argument("entry separator empty")
    if not kv_separator:
        raise invalid_argument("key-value separator empty")

    name, body = _carve(string, prefix, suffix, escape_chars, escape_symbol)
    if mapping is not None:
        parsed: Dict[str, str] = {}
        if body:
            for entry in _split(body, entry_separator, escape_chars, escape_symbol):
                key, value = _parse_entry(entry, kv_separator, escape_chars, escape_symbol)
                parsed[key] = value
        mapping.update(parsed)
        _LOG.debug("decoded %d map entries from %d chars", len(parsed), len(string))
    return unescape_string(name, escape_chars, escape_symbol)


def string_to_array(
    string: str,
    prefix: str,
    separator: str,
    suffix: str,
    escape_chars: Optional[str] = None,
    escape_symbol: str = DEFAULT_ESCAPE_SYMBOL,
) -> List[str]:
    """
    Parses a string produced by array_to_string.

    Validation and scanning follow string_to_map. Arrays have no name, so
    any text before the prefix is malformed input.

    Raises:
        CodecError: NULL_ARGUMENT, INVALID_ARGUMENT or MALFORMED_INPUT.
    """
    _require(input=string, prefix=prefix, separator=separator, suffix=suffix)
    if not string:
        if not prefix and not suffix:
            return []
        raise invalid_argument("input string empty")
    if not separator:
        raise invalid_argument("separator empty")

    leading, body = _carve(string, prefix, suffix, escape_chars, escape_symbol)
    if leading:
        raise malformed_input(f"unexpected text before prefix: {leading!r}")
    if not body:
        return []

    elements = [
        unescape_string(part, escape_chars, escape_symbol)
        for part in _split(body, separator, escape_chars, escape_symbol)
    ]
    _LOG.debug("decoded %d array elements from %d chars", len(elements), len(string))
    return elements


__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_ESCAPE_SYMBOL",
    "map_to_string",
    "properties_to_string",
    "array_to_string",
    "string_to_map",
    "string_to_array",
]
