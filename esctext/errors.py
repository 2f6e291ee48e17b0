"""
Base exceptions for esctext.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from EscTextUserError.

Codec failures are reported by a single class, CodecError, tagged with
an ErrorKind. Callers match on ``error.kind``, not on subclasses.
"""

from __future__ import annotations

import enum


class EscTextUserError(Exception):
    """
    Base class for all user-facing errors in esctext.

    These errors indicate problems that the caller can fix:
    malformed input strings, bad delimiters, broken dialect files, etc.
    """
    pass


class ErrorKind(enum.Enum):
    """Closed set of codec failure kinds."""
    NULL_ARGUMENT = "null-argument"
    INVALID_ARGUMENT = "invalid-argument"
    MALFORMED_INPUT = "malformed-input"


class CodecError(EscTextUserError, ValueError):
    """Ошибка кодека с указанием вида (ErrorKind)."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(f"{kind.value}: {message}")


def null_argument(name: str) -> CodecError:
    return CodecError(ErrorKind.NULL_ARGUMENT, f"null {name}")


def invalid_argument(message: str) -> CodecError:
    return CodecError(ErrorKind.INVALID_ARGUMENT, message)


def malformed_input(message: str) -> CodecError:
    return CodecError(ErrorKind.MALFORMED_INPUT, message)


__all__ = [
    "EscTextUserError",
    "ErrorKind",
    "CodecError",
    "null_argument",
    "invalid_argument",
    "malformed_input",
]
