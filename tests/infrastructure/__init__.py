"""
Unified test infrastructure for esctext.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess and parsing its JSON output
"""

from .file_utils import write, write_dialects
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "write_dialects",
    "run_cli",
    "jload",
]
