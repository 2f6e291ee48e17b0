"""
Dialect configuration for esctext.
"""

from __future__ import annotations

from .model import Dialect, DialectConfigError
from .load import (
    BUILTIN_DIALECTS,
    get_dialect,
    list_dialects,
    load_dialects,
    read_dialects_file,
)
from .paths import CONFIG_ENV, DIALECTS_FILE

__all__ = [
    "Dialect",
    "DialectConfigError",
    "BUILTIN_DIALECTS",
    "get_dialect",
    "list_dialects",
    "load_dialects",
    "read_dialects_file",
    "CONFIG_ENV",
    "DIALECTS_FILE",
]
