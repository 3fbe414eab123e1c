"""Commands that move, show, hide and style the terminal cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from termctl.command import Command, _TextSink

_CSI = "\x1b["
_U16_MAX = 0xFFFF


def _check_u16(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be between 0 and {_U16_MAX}, got {value}")


@dataclass(frozen=True)
class MoveTo(Command):
    """Move the cursor to ``(column, row)``; the top left cell is ``(0, 0)``."""

    column: int
    row: int

    def __post_init__(self) -> None:
        _check_u16("column", self.column)
        _check_u16("row", self.row)

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.row + 1};{self.column + 1}H")


@dataclass(frozen=True)
class _Count(Command):
    count: int

    def __post_init__(self) -> None:
        _check_u16("count", self.count)


@dataclass(frozen=True)
class MoveToNextLine(_Count):
    """Move the cursor down ``count`` lines and to the first column."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.count}E")


@dataclass(frozen=True)
class MoveToPreviousLine(_Count):
    """Move the cursor up ``count`` lines and to the first column."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.count}F")


@dataclass(frozen=True)
class MoveToColumn(Command):
    """Move the cursor to a zero-based column on the current row."""

    column: int

    def __post_init__(self) -> None:
        _check_u16("column", self.column)

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.column + 1}G")


@dataclass(frozen=True)
class MoveToRow(Command):
    """Move the cursor to a zero-based row on the current column."""

    row: int

    def __post_init__(self) -> None:
        _check_u16("row", self.row)

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.row + 1}d")


@dataclass(frozen=True)
class MoveUp(_Count):
    """Move the cursor up ``count`` rows."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.count}A")


@dataclass(frozen=True)
class MoveRight(_Count):
    """Move the cursor right ``count`` columns."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.count}C")


@dataclass(frozen=True)
class MoveDown(_Count):
    """Move the cursor down ``count`` rows."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.count}B")


@dataclass(frozen=True)
class MoveLeft(_Count):
    """Move the cursor left ``count`` columns."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}{self.count}D")


@dataclass(frozen=True)
class SavePosition(Command):
    """Save the current cursor position."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write("\x1b7")


@dataclass(frozen=True)
class RestorePosition(Command):
    """Restore the cursor position saved by :class:`SavePosition`."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write("\x1b8")


@dataclass(frozen=True)
class Hide(Command):
    """Hide the cursor."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?25l")


@dataclass(frozen=True)
class Show(Command):
    """Show the cursor."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?25h")


@dataclass(frozen=True)
class EnableBlinking(Command):
    """Enable cursor blinking."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?12h")


@dataclass(frozen=True)
class DisableBlinking(Command):
    """Disable cursor blinking."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?12l")


class SetCursorStyle(Enum):
    """Set the shape and blinking of the cursor."""

    DEFAULT_USER_SHAPE = 0
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERSCORE = 3
    STEADY_UNDERSCORE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6

    def write_ansi(self, f: _TextSink) -> None:
        """Write the ANSI representation of this style to ``f``."""
        f.write(f"{_CSI}{self.value} q")

    def ansi(self) -> str:
        """Return the ANSI representation of this style."""
        return f"{_CSI}{self.value} q"

    def __str__(self) -> str:
        return self.ansi()


Command.register(SetCursorStyle)