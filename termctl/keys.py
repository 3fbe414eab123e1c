"""Keyboard keys, modifiers and key events."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import ClassVar, Union


def _is_macos() -> bool:
    return sys.platform == "darwin"


def _is_windows() -> bool:
    return sys.platform == "win32"


class KeyModifiers(IntFlag):
    """Modifier keys held during a key or mouse event."""

    NONE = 0
    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000

    def __str__(self) -> str:
        """Join the names of the set modifiers with ``+``, using platform names."""
        return "+".join(
            _modifier_name(flag) for flag in _MODIFIER_ORDER if flag in self
        )

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


_MODIFIER_ORDER = (
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL,
    KeyModifiers.ALT,
    KeyModifiers.SUPER,
    KeyModifiers.HYPER,
    KeyModifiers.META,
)


def _modifier_name(flag: KeyModifiers) -> str:
    if flag is KeyModifiers.SHIFT:
        return "Shift"
    if flag is KeyModifiers.CONTROL:
        return "Ctrl" if _is_windows() else "Control"
    if flag is KeyModifiers.ALT:
        return "Option" if _is_macos() else "Alt"
    if flag is KeyModifiers.SUPER:
        if _is_macos():
            return "Command"
        if _is_windows():
            return "Windows"
        return "Super"
    if flag is KeyModifiers.HYPER:
        return "Hyper"
    return "Meta"


class KeyEventKind(Enum):
    """Whether a key was pressed, repeated or released."""

    PRESS = auto()
    REPEAT = auto()
    RELEASE = auto()


class KeyEventState(IntFlag):
    """Extra state about a key event."""

    NONE = 0
    KEYPAD = 0b0000_0001
    CAPS_LOCK = 0b0000_0010
    NUM_LOCK = 0b0000_0100


class MediaKeyCode(Enum):
    """A media key."""

    PLAY = "Play"
    PAUSE = "Pause"
    PLAY_PAUSE = "Play/Pause"
    REVERSE = "Reverse"
    STOP = "Stop"
    FAST_FORWARD = "Fast Forward"
    REWIND = "Rewind"
    TRACK_NEXT = "Next Track"
    TRACK_PREVIOUS = "Previous Track"
    RECORD = "Record"
    LOWER_VOLUME = "Lower Volume"
    RAISE_VOLUME = "Raise Volume"
    MUTE_VOLUME = "Mute Volume"

    def __str__(self) -> str:
        return self.value


class ModifierKeyCode(Enum):
    """A modifier key pressed on its own."""

    LEFT_SHIFT = auto()
    LEFT_CONTROL = auto()
    LEFT_ALT = auto()
    LEFT_SUPER = auto()
    LEFT_HYPER = auto()
    LEFT_META = auto()
    RIGHT_SHIFT = auto()
    RIGHT_CONTROL = auto()
    RIGHT_ALT = auto()
    RIGHT_SUPER = auto()
    RIGHT_HYPER = auto()
    RIGHT_META = auto()
    ISO_LEVEL3_SHIFT = auto()
    ISO_LEVEL5_SHIFT = auto()

    def __str__(self) -> str:
        """Name the key, using the platform's names for Control, Alt and Super."""
        if self is ModifierKeyCode.ISO_LEVEL3_SHIFT:
            return "Iso Level 3 Shift"
        if self is ModifierKeyCode.ISO_LEVEL5_SHIFT:
            return "Iso Level 5 Shift"
        side, _, key = self.name.partition("_")
        side = side.capitalize()
        if key == "CONTROL":
            name = "Control" if _is_macos() else "Ctrl"
        elif key == "ALT":
            name = "Option" if _is_macos() else "Alt"
        elif key == "SUPER":
            if _is_macos():
                name = "Command"
            elif _is_windows():
                name = "Windows"
            else:
                name = "Super"
        else:
            name = key.capitalize()
        return f"{side} {name}"


class KeyKind(Enum):
    """The kind of a key; F, CHAR, MEDIA and MODIFIER carry a value."""

    BACKSPACE = auto()
    ENTER = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    TAB = auto()
    BACK_TAB = auto()
    DELETE = auto()
    INSERT = auto()
    F = auto()
    CHAR = auto()
    NULL = auto()
    ESC = auto()
    CAPS_LOCK = auto()
    SCROLL_LOCK = auto()
    NUM_LOCK = auto()
    PRINT_SCREEN = auto()
    PAUSE = auto()
    MENU = auto()
    KEYPAD_BEGIN = auto()
    MEDIA = auto()
    MODIFIER = auto()


_VALUE_KINDS = {KeyKind.F, KeyKind.CHAR, KeyKind.MEDIA, KeyKind.MODIFIER}

_FIXED_NAMES = {
    KeyKind.LEFT: "Left",
    KeyKind.RIGHT: "Right",
    KeyKind.UP: "Up",
    KeyKind.DOWN: "Down",
    KeyKind.HOME: "Home",
    KeyKind.END: "End",
    KeyKind.PAGE_UP: "Page Up",
    KeyKind.PAGE_DOWN: "Page Down",
    KeyKind.TAB: "Tab",
    KeyKind.BACK_TAB: "Back Tab",
    KeyKind.INSERT: "Insert",
    KeyKind.NULL: "Null",
    KeyKind.ESC: "Esc",
    KeyKind.CAPS_LOCK: "Caps Lock",
    KeyKind.SCROLL_LOCK: "Scroll Lock",
    KeyKind.NUM_LOCK: "Num Lock",
    KeyKind.PRINT_SCREEN: "Print Screen",
    KeyKind.PAUSE: "Pause",
    KeyKind.MENU: "Menu",
    KeyKind.KEYPAD_BEGIN: "Begin",
}

KeyValue = Union[None, int, str, MediaKeyCode, ModifierKeyCode]


@dataclass(frozen=True)
class KeyCode:
    """A key: its kind and, for F, character, media and modifier keys, its value."""

    kind: KeyKind
    value: KeyValue = None

    BACKSPACE: ClassVar[KeyCode]
    ENTER: ClassVar[KeyCode]
    LEFT: ClassVar[KeyCode]
    RIGHT: ClassVar[KeyCode]
    UP: ClassVar[KeyCode]
    DOWN: ClassVar[KeyCode]
    HOME: ClassVar[KeyCode]
    END: ClassVar[KeyCode]
    PAGE_UP: ClassVar[KeyCode]
    PAGE_DOWN: ClassVar[KeyCode]
    TAB: ClassVar[KeyCode]
    BACK_TAB: ClassVar[KeyCode]
    DELETE: ClassVar[KeyCode]
    INSERT: ClassVar[KeyCode]
    NULL: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]
    CAPS_LOCK: ClassVar[KeyCode]
    SCROLL_LOCK: ClassVar[KeyCode]
    NUM_LOCK: ClassVar[KeyCode]
    PRINT_SCREEN: ClassVar[KeyCode]
    PAUSE: ClassVar[KeyCode]
    MENU: ClassVar[KeyCode]
    KEYPAD_BEGIN: ClassVar[KeyCode]

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value
        if not isinstance(kind, KeyKind):
            raise TypeError(f"kind must be a KeyKind, got {type(kind).__name__}")
        if kind is KeyKind.CHAR:
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"a character key needs one character, got {value!r}")
        elif kind is KeyKind.F:
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"a function key number must be an int, got {value!r}")
            if not 0 <= value <= 0xFF:
                raise ValueError(f"function key number must be between 0 and 255, got {value}")
        elif kind is KeyKind.MEDIA:
            if not isinstance(value, MediaKeyCode):
                raise TypeError(f"a media key needs a MediaKeyCode, got {value!r}")
        elif kind is KeyKind.MODIFIER:
            if not isinstance(value, ModifierKeyCode):
                raise TypeError(f"a modifier key needs a ModifierKeyCode, got {value!r}")
        elif value is not None:
            raise ValueError(f"{kind.name} takes no value, got {value!r}")

    @classmethod
    def char(cls, c: str) -> KeyCode:
        """A character key."""
        return cls(KeyKind.CHAR, c)

    @classmethod
    def f(cls, n: int) -> KeyCode:
        """Function key ``n``; ``f(1)`` is F1."""
        return cls(KeyKind.F, n)

    @classmethod
    def media(cls, media: MediaKeyCode) -> KeyCode:
        """A media key."""
        return cls(KeyKind.MEDIA, media)

    @classmethod
    def modifier(cls, modifier: ModifierKeyCode) -> KeyCode:
        """A modifier key pressed on its own."""
        return cls(KeyKind.MODIFIER, modifier)

    def __str__(self) -> str:
        """Name the key for display, using the platform's names."""
        kind = self.kind
        if kind is KeyKind.BACKSPACE:
            return "Delete" if _is_macos() else "Backspace"
        if kind is KeyKind.DELETE:
            return "Fwd Del" if _is_macos() else "Del"
        if kind is KeyKind.ENTER:
            return "Return" if _is_macos() else "Enter"
        if kind is KeyKind.F:
            return f"F{self.value}"
        if kind is KeyKind.CHAR:
            return "Space" if self.value == " " else str(self.value)
        if kind in (KeyKind.MEDIA, KeyKind.MODIFIER):
            return str(self.value)
        return _FIXED_NAMES[kind]


for _kind in KeyKind:
    if _kind not in _VALUE_KINDS:
        setattr(KeyCode, _kind.name, KeyCode(_kind))
del _kind


def _is_ascii_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_ascii_lower(c: str) -> bool:
    return "a" <= c <= "z"


@dataclass(frozen=True, eq=False)
class KeyEvent:
    """A key event with its modifiers, kind and state.

    Equality and hashing treat an uppercase character and a character with
    SHIFT held as the same key.
    """

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS
    state: KeyEventState = field(default=KeyEventState.NONE)

    def _normalized(self) -> tuple[KeyCode, KeyModifiers, KeyEventKind, KeyEventState]:
        code, modifiers = self.code, KeyModifiers(self.modifiers)
        if code.kind is KeyKind.CHAR:
            c = code.value
            assert isinstance(c, str)
            if _is_ascii_upper(c):
                modifiers |= KeyModifiers.SHIFT
            elif KeyModifiers.SHIFT in modifiers and _is_ascii_lower(c):
                code = KeyCode.char(c.upper())
        return code, modifiers, self.kind, KeyEventState(self.state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyEvent):
            return NotImplemented
        return self._normalized() == other._normalized()

    def __hash__(self) -> int:
        return hash(self._normalized())