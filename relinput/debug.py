"""Optional debug logging to a file, switched on through the environment."""

from __future__ import annotations

import os
from typing import Any

_ENABLE_VAR = "RELATIVE_INPUT_DEBUG"
_PATH_VAR = "RELATIVE_INPUT_DEBUG_PATH"


def debug_enabled() -> bool:
    """Return True when RELATIVE_INPUT_DEBUG is exactly ``ON``."""
    return os.environ.get(_ENABLE_VAR) == "ON"


def debug_path() -> str:
    """Return the file that debug output is appended to."""
    return os.environ.get(_PATH_VAR, "")


def _append(text: str) -> int:
    with open(debug_path(), "a", encoding="utf-8") as handle:
        return handle.write(text)


def debugf(message: str, *args: Any) -> int:
    """Append ``message % args`` to the debug file; return characters written."""
    if not debug_enabled():
        return 0
    text = message % args if args else message
    return _append(text)


def debugln(*args: Any) -> int:
    """Append the arguments, space separated and newline terminated."""
    if not debug_enabled():
        return 0
    return _append(" ".join(str(arg) for arg in args) + "\n")