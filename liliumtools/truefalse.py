"""The true and false commands."""

from __future__ import annotations

import sys
from typing import Optional

_VERSION = "0.1.0"


def help_version(name: str, code: str, argv: list[str]) -> Optional[int]:
    """Handle leading --help/--version options.

    Returns 0 if one was handled (after printing), otherwise None. Scanning
    stops at the first argument that is neither.
    """
    prg_name, *options = argv
    for arg in options:
        if arg == "--version":
            print(f"{name} (lilium-tools) v{_VERSION}")
            return 0
        if arg == "--help":
            print(f"Usage: {prg_name} [OPTIONS...] [--] [ARGS...]")
            print(f"Trivially exits {code}")
            print("Options:")
            print("\t--help: Prints this message and exits")
            print("\t--version: Prints version information and exits")
            return 0
        break
    return None


def true_main(argv: Optional[list[str]] = None) -> int:
    """Exit successfully."""
    args = sys.argv if argv is None else argv
    handled = help_version("true", "succesfully", args)
    return 0 if handled is None else handled


def false_main(argv: Optional[list[str]] = None) -> int:
    """Exit unsuccessfully."""
    args = sys.argv if argv is None else argv
    handled = help_version("false", "unsuccesfully", args)
    return 1 if handled is None else handled