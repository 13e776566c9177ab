"""Drive the X pointer and keyboard through the xdotool command."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import threading
from enum import IntEnum

_INTEGER = re.compile(r"[+-]?[0-9]+")


class MouseButton(IntEnum):
    """xdotool button numbers."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


def _atoi(text: str) -> int:
    if _INTEGER.fullmatch(text):
        return int(text)
    return 0


def _value_after_equals(field: str) -> int:
    parts = field.split("=")
    return _atoi(parts[1]) if len(parts) > 1 else 0


class Xdotool:
    """Sends input events to one X display."""

    def __init__(self, display: str) -> None:
        self.display = display

    def _exec(self, event: str, *values: str) -> str:
        command = f"xdotool {event} {' '.join(values)}"
        env = {**os.environ, "DISPLAY": self.display}
        try:
            completed = subprocess.run(
                ["/bin/bash", "-c", command],
                capture_output=True,
                text=True,
                check=False,
                env=env,
            )
        except OSError as exc:
            sys.stderr.write(f"Failed to input: {exc}")
            return ""
        if completed.returncode != 0:
            sys.stderr.write(f"Failed to input: exit status {completed.returncode}")
        return completed.stdout or ""

    def _background(self, event: str, *values: str) -> threading.Thread:
        thread = threading.Thread(target=self._exec, args=(event, *values), daemon=True)
        thread.start()
        return thread

    def mouse_move_relative(self, x: int | str, y: int | str) -> threading.Thread:
        """Move the pointer by (x, y) in the background."""
        return self._background("mousemove_relative", "--", str(x), str(y))

    def mouse_move_absolute(self, x: int | str, y: int | str) -> threading.Thread:
        """Move the pointer to (x, y) in the background."""
        return self._background("mousemove", "--", str(x), str(y))

    def mouse_down(self, button: int) -> threading.Thread:
        """Press a mouse button in the background."""
        return self._background("mousedown", "--", str(int(button)))

    def mouse_up(self, button: int) -> threading.Thread:
        """Release a mouse button in the background."""
        return self._background("mouseup", "--", str(int(button)))

    def wheel_up(self) -> threading.Thread:
        """Scroll the wheel up one step in the background."""
        return self._background("click", str(int(MouseButton.WHEEL_UP)))

    def wheel_down(self) -> threading.Thread:
        """Scroll the wheel down one step in the background."""
        return self._background("click", str(int(MouseButton.WHEEL_DOWN)))

    def get_position(self) -> tuple[int, int]:
        """Return the pointer position, or (0, 0) if it cannot be read."""
        lines = self._exec("getmouselocation", "--shell").split("\n")
        if len(lines) < 2 or "=" not in lines[0]:
            return 0, 0
        return _value_after_equals(lines[0]), _value_after_equals(lines[1])

    def get_window_geometry(self) -> tuple[int, int]:
        """Return the display width and height from xdotool's geometry output."""
        fields = self._exec("getdisplaygeometry").split(" ")
        width = _value_after_equals(fields[0])
        height = _value_after_equals(fields[1]) if len(fields) > 1 else 0
        return width, height

    def key_down(self, key: str) -> None:
        """Press a key, waiting for xdotool to finish."""
        self._exec("keydown", key)

    def key_up(self, key: str) -> None:
        """Release a key, waiting for xdotool to finish."""
        self._exec("keyup", key)