"""Terminal commands and the functions that queue and execute them."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Any, Protocol, TypeVar


class _TextSink(Protocol):
    def write(self, s: str) -> Any: ...


W = TypeVar("W")


class Command(ABC):
    """An action on the terminal, expressed as an ANSI escape sequence."""

    @abstractmethod
    def write_ansi(self, f: _TextSink) -> None:
        """Write the ANSI representation of this command to the text sink ``f``."""

    def ansi(self) -> str:
        """Return the ANSI representation of this command as a string."""
        buffer = io.StringIO()
        self.write_ansi(buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.ansi()


def _write_text(writer: Any, text: str) -> None:
    if isinstance(writer, io.TextIOBase):
        writer.write(text)
    elif isinstance(writer, (io.RawIOBase, io.BufferedIOBase, bytearray)):
        data = text.encode("utf-8")
        if isinstance(writer, bytearray):
            writer.extend(data)
        else:
            writer.write(data)
    else:
        try:
            writer.write(text)
        except TypeError:
            writer.write(text.encode("utf-8"))


def queue(writer: W, *args: Command) -> W:
    """Write the given commands to ``writer`` without flushing it.

    The commands take effect once the writer is flushed. Returns the writer
    so calls can be chained.
    """
    for command in args:
        if not isinstance(command, Command):
            raise TypeError(f"expected a Command, got {type(command).__name__}")
        _write_text(writer, command.ansi())
    return writer


def execute(writer: W, *args: Command) -> W:
    """Write the given commands to ``writer`` and flush it."""
    queue(writer, *args)
    flush = getattr(writer, "flush", None)
    if flush is not None:
        flush()
    return writer