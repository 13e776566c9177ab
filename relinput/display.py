"""Find the running X display and the size of its screen."""

from __future__ import annotations

import os
import re
import subprocess

_XORG_MARKER = "/usr/lib/xorg/Xorg "
_XVNC_MARKER = "/usr/bin/Xvnc "
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Parse a plain decimal integer, giving 0 when the text is not one."""
    if _INTEGER.fullmatch(text):
        return int(text)
    return 0


def _output(args: list[str], env: dict[str, str] | None = None) -> str:
    """Run a command and return its standard output, or "" if it cannot start."""
    try:
        completed = subprocess.run(
            args, capture_output=True, text=True, check=False, env=env
        )
    except OSError:
        return ""
    return completed.stdout or ""


def _display_after(output: str, marker: str) -> str | None:
    parts = output.split(marker)
    if len(parts) > 1:
        return parts[1].split(" ")[0]
    return None


def get_display() -> str:
    """Return the display name of the running Xorg or Xvnc server, or ""."""
    found = _display_after(_output(["bash", "-c", "ps -x|grep Xorg"]), _XORG_MARKER)
    if found is not None:
        return found
    found = _display_after(_output(["bash", "-c", "ps -x|grep Xvnc"]), _XVNC_MARKER)
    if found is not None:
        return found
    return ""


def get_display_size(display: str) -> tuple[int, int]:
    """Return the current width and height of ``display`` as reported by xrandr.

    Gives (0, 0) when xrandr's output cannot be understood.
    """
    env = {**os.environ, "DISPLAY": display}
    output = _output(["bash", "-c", "/usr/bin/xrandr", display], env=env)
    if "," not in output:
        return 0, 0
    current = output.split(",")[1].strip()
    if "current" not in current:
        return 0, 0
    axis = current.split(" ")
    width = _atoi(axis[1]) if len(axis) > 1 else 0
    height = _atoi(axis[3]) if len(axis) > 3 else 0
    return width, height