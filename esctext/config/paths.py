from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Single source of truth for dialect file lookup.
DIALECTS_FILE = "esctext.yaml"
CONFIG_ENV = "ESCTEXT_CONFIG"


def dialects_path(root: Path) -> Path:
    """Path to the dialect file <root>/esctext.yaml."""
    return (root / DIALECTS_FILE).resolve()


def resolve_config_path(explicit: Optional[Path], root: Optional[Path] = None) -> Optional[Path]:
    """
    Which dialect file to read:
    explicit path → $ESCTEXT_CONFIG → <root>/esctext.yaml (only if it exists).
    """
    if explicit is not None:
        return explicit
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    candidate = dialects_path(root or Path.cwd())
    return candidate if candidate.is_file() else None
