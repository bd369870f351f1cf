"""A small buffered reader over any object with ``read(size)``."""

from __future__ import annotations

from typing import Any, Union

from .errors import ErrorKind, ToolError

_BUFFER_SIZE = 64


class InvalidUtf8Error(ToolError):
    """Raised when a line read from the stream is not valid UTF-8."""

    def __init__(self, message: str = "Invalid UTF-8 Text") -> None:
        super().__init__(ErrorKind.INVALID_DATA, message)


class BufReader:
    """Buffers reads from an underlying byte reader in 64-byte blocks."""

    def __init__(self, inner: Any) -> None:
        self._inner = inner
        self._buf = b""
        self._pos = 0

    def fill_buf(self) -> bytes:
        """Return the unread buffered bytes, refilling from the reader if empty.

        An empty result means the underlying reader is at end of input.
        """
        if self._pos >= len(self._buf):
            self._buf = self._inner.read(_BUFFER_SIZE) or b""
            self._pos = 0
        return self._buf[self._pos:]

    def consume(self, amount: int) -> None:
        """Mark ``amount`` buffered bytes as read."""
        self._pos += amount

    def read(self, size: int) -> bytes:
        """Read at most ``size`` bytes, from the buffer when possible."""
        available = self.fill_buf()
        chunk = available[:size]
        self.consume(len(chunk))
        return chunk

    def read_until(self, delim: Union[int, bytes]) -> bytes:
        """Read up to and including ``delim``, or to end of input."""
        marker = bytes([delim]) if isinstance(delim, int) else bytes(delim)
        if len(marker) != 1:
            raise ValueError("delimiter must be a single byte")
        parts: list[bytes] = []
        while True:
            available = self.fill_buf()
            if not available:
                break
            found = available.find(marker)
            if found >= 0:
                parts.append(available[: found + 1])
                self.consume(found + 1)
                break
            parts.append(available)
            self.consume(len(available))
        return b"".join(parts)

    def read_line(self) -> str:
        """Read one line, newline included; return '' at end of input.

        Raises InvalidUtf8Error if the line is not valid UTF-8.
        """
        data = self.read_until(b"\n")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUtf8Error() from None

    def into_inner(self) -> Any:
        """Return the underlying reader."""
        return self._inner