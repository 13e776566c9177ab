"""Key tables, X display helpers, xdotool input and debug logging for relaying remote input."""

__version__ = "0.1.0"

__all__ = ["debug", "display", "keymap", "windows_keys", "winkeys_standard", "xdotool"]