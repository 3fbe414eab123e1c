import io

import pytest

from termctl.command import execute, queue
from termctl.event import (
    DisableBracketedPaste,
    DisableFocusChange,
    DisableMouseCapture,
    EnableBracketedPaste,
    EnableFocusChange,
    EnableMouseCapture,
    Event,
    FocusGained,
    FocusLost,
    Key,
    KeyboardEnhancementFlags,
    Mouse,
    MouseAction,
    MouseButton,
    MouseEvent,
    MouseEventKind,
    Paste,
    PopKeyboardEnhancementFlags,
    PushKeyboardEnhancementFlags,
    Resize,
)
from termctl.keys import KeyCode, KeyEvent, KeyEventKind, KeyModifiers


def _describe(event):
    if isinstance(event, FocusGained):
        return "gained"
    if isinstance(event, FocusLost):
        return "lost"
    if isinstance(event, Key):
        return str(event.event.code)
    if isinstance(event, Paste):
        return event.text
    if isinstance(event, Resize):
        return (event.columns, event.rows)
    return None


def test_enable_mouse_capture_sequence():
    assert EnableMouseCapture().ansi() == (
        "\x1b[?1000h\x1b[?1002h\x1b[?1003h\x1b[?1015h\x1b[?1006h"
    )


def test_disable_mouse_capture_is_reverse_of_enable():
    enable = EnableMouseCapture().ansi().split("\x1b")[1:]
    disable = DisableMouseCapture().ansi().split("\x1b")[1:]
    assert [s[:-1] for s in reversed(enable)] == [s[:-1] for s in disable]
    assert all(s.endswith("l") for s in disable)


@pytest.mark.parametrize(
    "command, expected",
    [
        (EnableFocusChange(), "\x1b[?1004h"),
        (DisableFocusChange(), "\x1b[?1004l"),
        (EnableBracketedPaste(), "\x1b[?2004h"),
        (DisableBracketedPaste(), "\x1b[?2004l"),
        (PopKeyboardEnhancementFlags(), "\x1b[<1u"),
    ],
)
def test_fixed_sequences(command, expected):
    assert command.ansi() == expected
    assert str(command) == expected


def test_push_keyboard_enhancement_flags_writes_bits():
    flags = KeyboardEnhancementFlags.DISAMBIGUATE_ESCAPE_CODES
    assert PushKeyboardEnhancementFlags(flags).ansi() == "\x1b[>1u"


def test_push_combined_flags_round_trips_bits():
    flags = (
        KeyboardEnhancementFlags.DISAMBIGUATE_ESCAPE_CODES
        | KeyboardEnhancementFlags.REPORT_ALL_KEYS_AS_ESCAPE_CODES
        | KeyboardEnhancementFlags.REPORT_ALTERNATE_KEYS
        | KeyboardEnhancementFlags.REPORT_EVENT_TYPES
    )
    text = PushKeyboardEnhancementFlags(flags).ansi()
    assert text.startswith("\x1b[>") and text.endswith("u")
    assert KeyboardEnhancementFlags(int(text[3:-1])) == flags


def test_push_rejects_non_flags():
    with pytest.raises(TypeError):
        PushKeyboardEnhancementFlags("1")


def test_queue_and_execute_write_commands():
    buffer = io.StringIO()
    execute(buffer, EnableBracketedPaste(), EnableFocusChange())
    assert buffer.getvalue() == "\x1b[?2004h\x1b[?1004h"
    queue(buffer, PopKeyboardEnhancementFlags())
    assert buffer.getvalue().endswith("\x1b[<1u")


def test_key_from_keycode_equals_key_press():
    assert Key(KeyCode.char("c")) == Key(KeyEvent(KeyCode.char("c")))
    assert Key(KeyCode.ESC).event.kind is KeyEventKind.PRESS


def test_key_equality_normalizes_case():
    lower_shift = Key(KeyEvent(KeyCode.char("d"), KeyModifiers.SHIFT))
    upper = Key(KeyEvent(KeyCode.char("D")))
    assert lower_shift == upper
    assert hash(lower_shift) == hash(upper)
    assert Key(KeyCode.char("c")) != Key(KeyCode.ESC)


def test_key_rejects_other_types():
    with pytest.raises(TypeError):
        Key("c")


def test_events_are_events_and_dispatch():
    events = [
        FocusGained(),
        FocusLost(),
        Key(KeyCode.ENTER),
        Paste("hello"),
        Resize(80, 24),
    ]
    assert all(isinstance(event, Event) for event in events)
    names = [_describe(event) for event in events]
    assert names == ["gained", "lost", "Enter", "hello", (80, 24)]


def test_focus_events_differ():
    assert FocusGained() == FocusGained()
    assert FocusGained() != FocusLost()


def test_resize_bounds():
    assert Resize(0, 65535).rows == 65535
    with pytest.raises(ValueError):
        Resize(-1, 10)
    with pytest.raises(ValueError):
        Resize(10, 65536)
    with pytest.raises(TypeError):
        Resize(1.5, 2)


def test_paste_requires_text():
    assert Paste("x") == Paste("x")
    with pytest.raises(TypeError):
        Paste(b"x")


def test_mouse_event_kind_button_rules():
    kind = MouseEventKind(MouseAction.DOWN, MouseButton.LEFT)
    assert kind.button is MouseButton.LEFT
    assert MouseEventKind(MouseAction.SCROLL_UP).button is None
    with pytest.raises(ValueError):
        MouseEventKind(MouseAction.DRAG)
    with pytest.raises(ValueError):
        MouseEventKind(MouseAction.MOVED, MouseButton.RIGHT)
    with pytest.raises(TypeError):
        MouseEventKind("down", MouseButton.LEFT)


def test_mouse_event_fields_and_equality():
    kind = MouseEventKind(MouseAction.UP, MouseButton.MIDDLE)
    first = MouseEvent(kind, 3, 4, KeyModifiers.CONTROL)
    second = MouseEvent(kind, 3, 4, KeyModifiers.CONTROL)
    assert first == second
    assert Mouse(first) == Mouse(second)
    assert hash(Mouse(first)) == hash(Mouse(second))
    assert MouseEvent(kind, 3, 4).modifiers == KeyModifiers.NONE


def test_mouse_event_validation():
    kind = MouseEventKind(MouseAction.MOVED)
    with pytest.raises(ValueError):
        MouseEvent(kind, -1, 0)
    with pytest.raises(TypeError):
        MouseEvent(MouseAction.MOVED, 0, 0)
    with pytest.raises(TypeError):
        Mouse(kind)