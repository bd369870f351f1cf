"""An interactive mini shell reading commands line by line."""

from __future__ import annotations

import contextlib
import sys
from typing import Any, Optional, TextIO

from .bufio import BufReader
from .errors import ToolError
from .runtime import run_main
from .shell import ShellExit, exec_line, parse_shell, split_shell


def run_shell(stdin: Any, stdout: TextIO, stderr: TextIO) -> int:
    """Read and run commands from the byte reader ``stdin`` until end of input.

    Returns the exit status. Raises InvalidUtf8Error for undecodable input.
    """
    reader = BufReader(stdin)
    while True:
        stdout.write("# ")
        stdout.flush()
        text = reader.read_line()
        if not text:
            print("exit", file=stdout)
            return 0
        line = parse_shell(split_shell(text))
        if line.command is None:
            continue
        print(line, file=stderr)
        try:
            with contextlib.redirect_stdout(stdout):
                exec_line(line)
        except ShellExit as done:
            return done.status
        except ToolError as exc:
            print(f"Error spawning {line.command}: {exc}", file=stdout)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the shell on the process's standard streams."""
    args = sys.argv if argv is None else argv
    name = args[0] if args else None
    return run_main(
        lambda: run_shell(sys.stdin.buffer, sys.stdout, sys.stderr),
        program_name=name,
        stderr=sys.stderr,
    )