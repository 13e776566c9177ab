# relinput

Building blocks for relaying keyboard and mouse input from one machine to an
X11 desktop on another:

- key tables that map Windows virtual-key codes and Linux keycodes to the key
  names `xdotool` understands (`relinput.keymap`,
  `relinput.winkeys_standard`, `relinput.windows_keys`);
- a small wrapper that drives `xdotool` against a given X display
  (`relinput.xdotool`);
- helpers that find the running X display and its screen size
  (`relinput.display`);
- optional debug logging controlled by environment variables
  (`relinput.debug`).

## Installation

```
pip install .
```

The package has no Python dependencies. Sending input needs `bash` and
`xdotool` on the target machine; `get_display` uses `ps` and `grep`, and
`get_display_size` uses `/usr/bin/xrandr`.

## Key tables

```python
from relinput.keymap import EventType, KeyNotFoundError, get_linux_key_detail
from relinput.windows_keys import (
    get_windows_key_detail,
    get_windows_key_detail_from_event_input,
)

key = get_windows_key_detail(0x41)
print(key.constant, key.event_input)    # A key a
print(key.event_type is EventType.KEY)  # True

linux = get_linux_key_detail(0)
print(linux.event_input, hex(linux.windows_key))  # a 0x41

print(get_windows_key_detail_from_event_input("Escape").value)  # 27

try:
    get_windows_key_detail(0x0A)
except KeyNotFoundError:
    print("no such key")
```

- `EventType` is an `IntEnum` with `MOUSE`, `MOUSE_MOVE`, `WHEEL` and `KEY`.
- `LinuxKey` and `WindowsKey` are frozen dataclasses. Keys with no `xdotool`
  name have an empty `event_input`.
- `get_linux_key_detail_from_event_input` looks a Linux key up by its
  `xdotool` name.
- `winkeys_standard.standard_keys()` holds codes 0x01 to 0x6F,
  `windows_keys.extended_keys()` codes 0x70 to 0xFE, and
  `windows_keys.all_windows_keys()` all of them in code order. All three are
  read-only mappings from code to `WindowsKey`.
- Where several Windows codes share one `xdotool` name,
  `get_windows_key_detail_from_event_input` returns the lowest code.
- Every failed lookup raises `KeyNotFoundError`, a `LookupError`.

## Driving xdotool

```python
from relinput.display import get_display, get_display_size
from relinput.xdotool import MouseButton, Xdotool

display = get_display()
print(get_display_size(display))

xdo = Xdotool(display)
xdo.mouse_move_relative(10, -5)
xdo.mouse_move_absolute(100, 200)
xdo.mouse_down(MouseButton.LEFT)
xdo.mouse_up(MouseButton.LEFT)
xdo.wheel_down()
xdo.key_down("shift")
xdo.key_up("shift")
print(xdo.get_position())
print(xdo.get_window_geometry())
```

Mouse movement, button and wheel calls run `xdotool` in a background thread
and return that thread; key presses wait for `xdotool` to finish. When
`xdotool` fails, a "Failed to input" message is written to standard error
and nothing is raised. `get_position`, `get_window_geometry` and
`get_display_size` return `(0, 0)` when the output cannot be read, and
`get_display` returns `""` when no Xorg or Xvnc server is found.

## Debug logging

Set `RELATIVE_INPUT_DEBUG=ON` and `RELATIVE_INPUT_DEBUG_PATH=/path/to/log`,
then `relinput.debug.debugf(message, *args)` appends `message % args` and
`relinput.debug.debugln(*args)` appends its arguments space separated with a
newline. Both return the number of characters written; with debugging off
they write nothing and return 0.

## What it does not do

There is no command to run. The package does not capture input on the sending
machine, does not carry events over a connection, and does not read event
lines and replay them; it only provides the key tables and the calls that
send input to an X display.

## Tests

```
pip install .[test]
pytest
```