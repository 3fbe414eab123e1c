"""Terminal events and the commands that turn event reporting on and off."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import Optional, Union

from termctl.command import Command, _TextSink
from termctl.keys import KeyCode, KeyEvent, KeyModifiers

_CSI = "\x1b["
_U16_MAX = 0xFFFF


def _check_u16(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be between 0 and {_U16_MAX}, got {value}")


class KeyboardEnhancementFlags(IntFlag):
    """Flags asking a compatible terminal to add information to key events."""

    DISAMBIGUATE_ESCAPE_CODES = 0b0000_0001
    REPORT_EVENT_TYPES = 0b0000_0010
    REPORT_ALTERNATE_KEYS = 0b0000_0100
    REPORT_ALL_KEYS_AS_ESCAPE_CODES = 0b0000_1000


class MouseButton(Enum):
    """A mouse button."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class MouseAction(Enum):
    """What the mouse did; DOWN, UP and DRAG involve a button."""

    DOWN = auto()
    UP = auto()
    DRAG = auto()
    MOVED = auto()
    SCROLL_DOWN = auto()
    SCROLL_UP = auto()
    SCROLL_LEFT = auto()
    SCROLL_RIGHT = auto()


_BUTTON_ACTIONS = frozenset({MouseAction.DOWN, MouseAction.UP, MouseAction.DRAG})


@dataclass(frozen=True)
class MouseEventKind:
    """The kind of a mouse event: an action and, where it has one, its button."""

    action: MouseAction
    button: Optional[MouseButton] = None

    def __post_init__(self) -> None:
        if not isinstance(self.action, MouseAction):
            raise TypeError(
                f"action must be a MouseAction, got {type(self.action).__name__}"
            )
        if self.action in _BUTTON_ACTIONS:
            if not isinstance(self.button, MouseButton):
                raise ValueError(f"{self.action.name} needs a MouseButton")
        elif self.button is not None:
            raise ValueError(f"{self.action.name} takes no button")


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a zero-based cell, with the modifiers held at the time."""

    kind: MouseEventKind
    column: int
    row: int
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.kind, MouseEventKind):
            raise TypeError(
                f"kind must be a MouseEventKind, got {type(self.kind).__name__}"
            )
        _check_u16("column", self.column)
        _check_u16("row", self.row)
        object.__setattr__(self, "modifiers", KeyModifiers(self.modifiers))


class Event:
    """Base class of all terminal events."""

    __slots__ = ()


@dataclass(frozen=True)
class FocusGained(Event):
    """The terminal gained focus."""


@dataclass(frozen=True)
class FocusLost(Event):
    """The terminal lost focus."""


@dataclass(frozen=True)
class Key(Event):
    """A key event; a bare KeyCode is taken as a plain key press."""

    event: KeyEvent

    def __post_init__(self) -> None:
        event: Union[KeyEvent, KeyCode] = self.event
        if isinstance(event, KeyCode):
            object.__setattr__(self, "event", KeyEvent(event))
        elif not isinstance(event, KeyEvent):
            raise TypeError(
                f"event must be a KeyEvent or KeyCode, got {type(event).__name__}"
            )


@dataclass(frozen=True)
class Mouse(Event):
    """A mouse event."""

    event: MouseEvent

    def __post_init__(self) -> None:
        if not isinstance(self.event, MouseEvent):
            raise TypeError(
                f"event must be a MouseEvent, got {type(self.event).__name__}"
            )


@dataclass(frozen=True)
class Paste(Event):
    """Text pasted into the terminal while bracketed paste is enabled."""

    text: str = field(default="")

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"text must be a str, got {type(self.text).__name__}")


@dataclass(frozen=True)
class Resize(Event):
    """The terminal was resized to ``columns`` by ``rows``."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        _check_u16("columns", self.columns)
        _check_u16("rows", self.rows)


@dataclass(frozen=True)
class EnableMouseCapture(Command):
    """Enable mouse event reporting."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(
            f"{_CSI}?1000h"  # normal tracking: press and release
            f"{_CSI}?1002h"  # button-event tracking: dragging
            f"{_CSI}?1003h"  # any-event tracking: all motion
            f"{_CSI}?1015h"  # RXVT mode: coordinates above 223
            f"{_CSI}?1006h"  # SGR mode: preferred over RXVT
        )


@dataclass(frozen=True)
class DisableMouseCapture(Command):
    """Disable mouse event reporting."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(
            f"{_CSI}?1006l"
            f"{_CSI}?1015l"
            f"{_CSI}?1003l"
            f"{_CSI}?1002l"
            f"{_CSI}?1000l"
        )


@dataclass(frozen=True)
class EnableFocusChange(Command):
    """Enable focus gained and lost events."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?1004h")


@dataclass(frozen=True)
class DisableFocusChange(Command):
    """Disable focus gained and lost events."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?1004l")


@dataclass(frozen=True)
class EnableBracketedPaste(Command):
    """Enable bracketed paste mode."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?2004h")


@dataclass(frozen=True)
class DisableBracketedPaste(Command):
    """Disable bracketed paste mode."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}?2004l")


@dataclass(frozen=True)
class PushKeyboardEnhancementFlags(Command):
    """Push a level of keyboard enhancement flags onto the terminal's stack."""

    flags: KeyboardEnhancementFlags

    def __post_init__(self) -> None:
        if isinstance(self.flags, bool) or not isinstance(self.flags, int):
            raise TypeError(
                f"flags must be KeyboardEnhancementFlags, got {type(self.flags).__name__}"
            )
        object.__setattr__(self, "flags", KeyboardEnhancementFlags(self.flags))

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}>{int(self.flags)}u")


@dataclass(frozen=True)
class PopKeyboardEnhancementFlags(Command):
    """Pop one level of keyboard enhancement flags."""

    def write_ansi(self, f: _TextSink) -> None:
        f.write(f"{_CSI}<1u")