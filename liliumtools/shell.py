"""Word splitting, line parsing and execution for the mini shell."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

from . import archinfo, truefalse
from .errors import ErrorKind, ToolError
from .helpers import split_once_owned

_EXIT_COMMANDS = frozenset({"return", "exit", "logout"})
_STATUS_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_BUILTINS: dict[str, Callable[[list[str]], int]] = {
    "true": truefalse.true_main,
    "false": truefalse.false_main,
    "arch": archinfo.main,
}


class _State(enum.Enum):
    NORMAL = enum.auto()
    ESCAPE = enum.auto()
    DQUOTE = enum.auto()
    ESCAPE_DQUOTE = enum.auto()
    SQUOTE = enum.auto()
    ESCAPE_SQUOTE = enum.auto()


def _next_word(s: str) -> tuple[str, str]:
    """Take one word from the stripped, non-empty ``s``; return it and the rest."""
    state = _State.NORMAL
    parts: list[str] = []
    for n, c in enumerate(s):
        if state is _State.NORMAL:
            if c.isspace():
                return "".join(parts) or s[:n], s[n:]
            if c == "\\":
                parts.append(s[:n])
                state = _State.ESCAPE
            elif c == '"':
                parts.append(s[:n])
                state = _State.DQUOTE
            elif c == "'":
                parts.append(s[:n])
                state = _State.SQUOTE
            elif c == ";":
                if n == 0:
                    return "".join(parts) or s[:1], s[1:]
                return "".join(parts) or s[:n], s[n:]
        elif state is _State.ESCAPE:
            parts.append(c)
            state = _State.NORMAL
        elif state is _State.ESCAPE_DQUOTE:
            parts.append(c)
            state = _State.DQUOTE
        elif state is _State.ESCAPE_SQUOTE:
            parts.append(c)
            state = _State.SQUOTE
        elif state is _State.DQUOTE:
            if c == '"':
                state = _State.NORMAL
            elif c == "\\":
                state = _State.ESCAPE_DQUOTE
            else:
                parts.append(c)
        else:
            if c == "'":
                state = _State.NORMAL
            elif c == "\\":
                state = _State.ESCAPE_SQUOTE
            else:
                parts.append(c)
    return s, ""


def split_shell(text: str) -> Iterator[str]:
    """Yield the words of a command line, honouring quotes, escapes and ';'."""
    rest = text
    while True:
        stripped = rest.strip()
        if not stripped:
            return
        word, rest = _next_word(stripped)
        yield word


@dataclass
class EnvVar:
    """A ``KEY=value`` assignment preceding a command."""

    key: str
    val: str


@dataclass
class ShellLine:
    """A parsed command line: environment assignments, command and arguments."""

    env: list[EnvVar] = field(default_factory=list)
    command: Optional[str] = None
    args: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        pieces = [f"{var.key}={var.val}" for var in self.env]
        if self.command is not None:
            pieces.append(self.command)
        text = " ".join(pieces)
        return text + "".join(f" {arg}" for arg in self.args)


class ShellExit(Exception):
    """Raised by the exit built-ins to end the shell with a status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def parse_shell(words: Iterable[str]) -> ShellLine:
    """Build a ShellLine: leading ``k=v`` words are env, then command, then args."""
    line = ShellLine()
    it = iter(words)
    for word in it:
        pair = split_once_owned(word, "=")
        if pair is None:
            line.command = word
            break
        line.env.append(EnvVar(*pair))
    line.args.extend(it)
    return line


def _parse_status(text: str) -> int:
    if not text:
        raise ToolError(ErrorKind.INVALID_INPUT, "cannot parse integer from empty string")
    if not _STATUS_RE.fullmatch(text):
        raise ToolError(ErrorKind.INVALID_INPUT, "invalid digit found in string")
    value = int(text)
    if value > _I32_MAX:
        raise ToolError(ErrorKind.INVALID_INPUT, "number too large to fit in target type")
    if value < _I32_MIN:
        raise ToolError(ErrorKind.INVALID_INPUT, "number too small to fit in target type")
    return value


def exec_line(line: ShellLine) -> Optional[int]:
    """Run a parsed line with the shell's built-in commands.

    Returns None when the line has no command, otherwise the command's exit
    status. The exit built-ins raise ShellExit; unknown commands raise a
    ToolError of kind NOT_FOUND.
    """
    command = line.command
    if command is None:
        return None
    if command in _EXIT_COMMANDS:
        print(f"exit command: {command}")
        status = _parse_status(line.args[0]) if line.args else 0
        raise ShellExit(status)
    runner = _BUILTINS.get(command)
    if runner is None:
        raise ToolError(ErrorKind.NOT_FOUND)
    return runner([command, *line.args])