from __future__ import annotations

import logging
import os

_LOG = logging.getLogger("esctext")

DEBUG_ENV = "ESCTEXT_DEBUG"


def setup_logging_once() -> None:
    """Package logger: DEBUG with $ESCTEXT_DEBUG set, WARNING otherwise. Idempotent."""
    if getattr(setup_logging_once, "_inited", False):
        return
    setup_logging_once._inited = True  # type: ignore[attr-defined]
    level = logging.DEBUG if os.environ.get(DEBUG_ENV) else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)


__all__ = ["setup_logging_once", "DEBUG_ENV"]
