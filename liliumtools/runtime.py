"""Program start-up support: exit-status reporting and environment lookup."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional, TextIO

from .errors import ToolError

DEFAULT_PROGRAM_NAME = "minish"


def report(
    result: Any,
    program_name: Optional[str] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Turn what a main function produced into an exit status.

    None means success (0), an int is the status itself, and an exception is
    printed to stderr as ``<program>: <error>`` and gives -1.
    """
    if isinstance(result, BaseException):
        out = stderr if stderr is not None else sys.stderr
        name = program_name or DEFAULT_PROGRAM_NAME
        print(f"{name}: {result!r}", file=out)
        return -1
    if result is None:
        return 0
    if isinstance(result, int) and not isinstance(result, bool):
        return result
    raise TypeError(f"Cannot return `{type(result).__name__}` from `main`.")


def run_main(
    main: Callable[[], Any],
    program_name: Optional[str] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Call ``main`` and report its outcome as an exit status."""
    try:
        result = main()
    except (ToolError, OSError) as exc:
        result = exc
    return report(result, program_name, stderr)


def parse_vars(entries: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield (name, value) pairs from ``NAME=value`` entries."""
    for entry in entries:
        name, sep, value = entry.partition("=")
        if not sep:
            raise ValueError(f"environment entry without '=': {entry!r}")
        yield name, value


def lookup_var(entries: Iterable[str], name: str) -> Optional[str]:
    """Return the value of the first entry named ``name``, or None."""
    return next((value for key, value in parse_vars(entries) if key == name), None)