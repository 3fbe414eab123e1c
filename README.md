# termctl

`termctl` represents terminal actions as small command objects. Each command knows its
ANSI escape sequence. You can queue commands onto a stream or execute them at once. The
package also has value types for keys, key modifiers, mouse input and terminal events.
It has no dependencies outside the standard library.

## Installing

```
pip install termctl
```

## Commands (`termctl.command`)

Every command is a `Command`. A command has three ways to give its escape sequence:

- `write_ansi(f)` writes the sequence to any object `f` that has a `write(str)` method.
- `ansi()` returns the sequence as a string.
- `str(command)` returns the same string.

There are two functions that send commands to a writer:

- `queue(writer, *commands)` writes the sequences to `writer` and does not flush it.
- `execute(writer, *commands)` writes the sequences and then calls `writer.flush()`, if
  the writer has that method.

Both functions return the writer. The writer can be a text stream, a binary stream or a
`bytearray`. For a binary stream or a `bytearray`, the text is encoded as UTF-8. If an
argument is not a `Command`, both functions raise `TypeError`.

```python
import sys

from termctl.command import execute, queue
from termctl.cursor import Hide, MoveTo, SetCursorStyle, Show

print(repr(MoveTo(4, 2).ansi()))   # '\x1b[3;5H' (column 4, row 2, both zero-based)

queue(sys.stdout, Hide(), MoveTo(0, 0))                 # written, not flushed
execute(sys.stdout, SetCursorStyle.STEADY_BAR, Show())  # written, then flushed
```

### Cursor commands (`termctl.cursor`)

| Command | Sequence |
| --- | --- |
| `MoveTo(column, row)` | `CSI row+1 ; column+1 H` |
| `MoveToColumn(column)` | `CSI column+1 G` |
| `MoveToRow(row)` | `CSI row+1 d` |
| `MoveUp(n)`, `MoveDown(n)`, `MoveRight(n)`, `MoveLeft(n)` | `CSI n A`, `B`, `C`, `D` |
| `MoveToNextLine(n)`, `MoveToPreviousLine(n)` | `CSI n E`, `CSI n F` |
| `SavePosition()`, `RestorePosition()` | `ESC 7`, `ESC 8` |
| `Hide()`, `Show()` | `CSI ?25l`, `CSI ?25h` |
| `EnableBlinking()`, `DisableBlinking()` | `CSI ?12h`, `CSI ?12l` |
| `SetCursorStyle.<member>` | `CSI <0–6> SP q` |

In this table, `CSI` is `ESC [` and `SP` is a space.

`SetCursorStyle` is an enum. Its members are `DEFAULT_USER_SHAPE`, `BLINKING_BLOCK`,
`STEADY_BLOCK`, `BLINKING_UNDERSCORE`, `STEADY_UNDERSCORE`, `BLINKING_BAR` and
`STEADY_BAR`.

Each coordinate and count must be an `int` from 0 to 65535. Any other type raises
`TypeError`. A value outside that range raises `ValueError`.

### Event mode commands (`termctl.event`)

- `EnableMouseCapture()` and `DisableMouseCapture()` switch on and off modes 1000,
  1002, 1003, 1015 and 1006. The disable command switches them off in reverse order.
- `EnableFocusChange()` and `DisableFocusChange()` switch mode 1004.
- `EnableBracketedPaste()` and `DisableBracketedPaste()` switch mode 2004.
- `PushKeyboardEnhancementFlags(flags)` writes `CSI > flags u`.
  `PopKeyboardEnhancementFlags()` writes `CSI < 1 u`.

`KeyboardEnhancementFlags` is an `IntFlag` with these members:

- `DISAMBIGUATE_ESCAPE_CODES`
- `REPORT_EVENT_TYPES`
- `REPORT_ALTERNATE_KEYS`
- `REPORT_ALL_KEYS_AS_ESCAPE_CODES`

## Keys (`termctl.keys`)

A `KeyCode` has two parts: a `KeyKind` and, for some kinds, a value.

- Keys that carry no value are class attributes, for example `KeyCode.ENTER`,
  `KeyCode.ESC` and `KeyCode.PAGE_UP`.
- Keys with a value are built with `KeyCode.char(c)`, `KeyCode.f(n)`,
  `KeyCode.media(MediaKeyCode...)` and `KeyCode.modifier(ModifierKeyCode...)`.

`KeyEvent` is made of four fields:

- `code`
- `modifiers`, a `KeyModifiers`
- `kind`, a `KeyEventKind`; the default is `PRESS`
- `state`, a `KeyEventState`

Two key events are equal, and hash the same, when they differ only in the case of an
ASCII letter and the Shift modifier:

```python
from termctl.keys import KeyCode, KeyEvent, KeyModifiers

assert KeyEvent(KeyCode.char("d"), KeyModifiers.SHIFT) == KeyEvent(KeyCode.char("D"))

print(KeyCode.f(1))                           # F1
print(KeyCode.char(" "))                      # Space
print(KeyModifiers.SHIFT | KeyModifiers.ALT)  # Shift+Alt (Shift+Option on macOS)
```

`str()` gives a display name for `KeyCode`, `KeyModifiers`, `MediaKeyCode` and
`ModifierKeyCode`. Some of these names depend on the platform:

| Key | macOS | Windows | Other platforms |
| --- | --- | --- | --- |
| Backspace | Delete | Backspace | Backspace |
| Delete | Fwd Del | Del | Del |
| Enter | Return | Enter | Enter |
| Alt | Option | Alt | Alt |
| Super | Command | Windows | Super |

## Events (`termctl.event`)

`Event` is the base class of these event types:

- `FocusGained()`
- `FocusLost()`
- `Key(event)`: `event` can be a `KeyEvent` or a bare `KeyCode`, which is taken as a
  plain key press.
- `Mouse(event)`
- `Paste(text)`
- `Resize(columns, rows)`

A `MouseEvent` is made of four fields:

- `kind`, a `MouseEventKind`
- `column`
- `row`
- `modifiers`

A `MouseEventKind` joins a `MouseAction` with a `MouseButton`. The actions `DOWN`, `UP`
and `DRAG` need a button. The scroll actions and `MOVED` must not have one.

```python
from termctl.event import Key
from termctl.keys import KeyCode

assert Key(KeyCode.ESC) == Key(KeyCode.ESC)
```

## What this package does not do

`termctl` only builds escape sequences and event values. It does not:

- read input from the terminal
- parse terminal responses into events
- switch raw mode
- ask the terminal for the cursor position or window size

To read events, you need your own input handling, which can build the event types above.

## Running the tests

```
pip install -e ".[test]"
pytest
```