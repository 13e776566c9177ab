"""Windows virtual key codes for mouse buttons, editing keys, digits, letters and keypad."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from relinput.keymap import EventType


@dataclass(frozen=True)
class WindowsKey:
    """Details of one Windows virtual key code."""

    constant: str
    value: int
    description: str
    event_type: EventType
    event_input: str = ""


def _key(value: int, constant: str, description: str, event_input: str = "") -> WindowsKey:
    return WindowsKey(constant, value, description, EventType.KEY, event_input)


def _mouse(value: int, constant: str, description: str, event_input: str = "") -> WindowsKey:
    return WindowsKey(constant, value, description, EventType.MOUSE, event_input)


_STANDARD = [
    _mouse(0x01, "VK_LBUTTON", "Left mouse button", "left"),
    _mouse(0x02, "VK_RBUTTON", "Right mouse button", "right"),
    _mouse(0x03, "VK_CANCEL", "Control-break processing"),
    _mouse(0x04, "VK_MBUTTON", "Middle mouse button (three-button mouse)", "middle"),
    _mouse(0x05, "VK_XBUTTON1", "X1 mouse button"),
    _mouse(0x06, "VK_XBUTTON2", "X2 mouse button"),
    _key(0x07, "", "Undefined"),
    _key(0x08, "VK_BACK", "BACKSPACE key", "BackSpace"),
    _key(0x09, "VK_TAB", "TAB key", "Tab"),
    _key(0x0C, "VK_CLEAR", "CLEAR key", "Clear"),
    _key(0x0D, "VK_RETURN", "ENTER key", "Return"),
    _key(0x10, "VK_SHIFT", "SHIFT key", "shift"),
    _key(0x11, "VK_CONTROL", "CTRL key", "ctrl"),
    _key(0x12, "VK_MENU", "ALT key", "alt"),
    _key(0x13, "VK_PAUSE", "PAUSE key", "Pause"),
    _key(0x14, "VK_CAPITAL", "CAPS LOCK key", "Caps_Lock"),
    _key(0x15, "VK_KANA", "IME Kana mode", "kana_switch"),
    _key(0x16, "VK_IME_ON", "IME On"),
    _key(0x17, "VK_JUNJA", "IME Junja mode"),
    _key(0x18, "VK_FINAL", "IME final mode"),
    _key(0x19, "VK_KANJI", "IME Kanji mode", "kana_switch"),
    _key(0x1A, "VK_IME_OFF", "IME Off"),
    _key(0x1B, "VK_ESCAPE", "ESC key", "Escape"),
    _key(0x1C, "VK_CONVERT", "IME convert"),
    _key(0x1D, "VK_NONCONVERT", "IME nonconvert"),
    _key(0x1E, "VK_ACCEPT", "IME accept"),
    _key(0x1F, "VK_MODECHANGE", "IME mode change request"),
    _key(0x20, "VK_SPACE", "SPACEBAR", "space"),
    _key(0x21, "VK_PRIOR", "PAGE UP key", "Page_Up"),
    _key(0x22, "VK_NEXT", "PAGE DOWN key", "Page_Down"),
    _key(0x23, "VK_END", "END key", "End"),
    _key(0x24, "VK_HOME", "HOME key", "Home"),
    _key(0x25, "VK_LEFT", "LEFT ARROW key", "Left"),
    _key(0x26, "VK_UP", "UP ARROW key", "Up"),
    _key(0x27, "VK_RIGHT", "RIGHT ARROW key", "Right"),
    _key(0x28, "VK_DOWN", "DOWN ARROW key", "Down"),
    _key(0x29, "VK_SELECT", "SELECT key", "Select"),
    _key(0x2A, "VK_PRINT", "PRINT key", "Print"),
    _key(0x2B, "VK_EXECUTE", "EXECUTE key", "Execute"),
    _key(0x2C, "VK_SNAPSHOT", "PRINT SCREEN key", "Print"),
    _key(0x2D, "VK_INSERT", "INS key", "Insert"),
    _key(0x2E, "VK_DELETE", "DEL key", "Delete"),
    _key(0x2F, "VK_HELP", "HELP key", "Help"),
    *(
        _key(0x30 + digit, f"{digit} key", f"{digit} key", str(digit))
        for digit in range(10)
    ),
    *(
        _key(ord(letter), f"{letter} key", f"{letter} key", letter.lower())
        for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    ),
    _key(0x5B, "VK_LWIN", "Left Windows key (Natural keyboard)", "Super_L"),
    _key(0x5C, "VK_RWIN", "Right Windows key (Natural keyboard)", "Super_R"),
    _key(0x5D, "VK_APPS", "Applications key (Natural keyboard)"),
    _key(0x5E, "", "Reserved"),
    _key(0x5F, "VK_SLEEP", "Computer Sleep key"),
    *(
        _key(0x60 + digit, f"VK_NUMPAD{digit}", f"Numeric keypad {digit} key", str(digit))
        for digit in range(10)
    ),
    _key(0x6A, "VK_MULTIPLY", "Multiply key", "multiply"),
    _key(0x6B, "VK_ADD", "Add key"),
    _key(0x6C, "VK_SEPARATOR", "Separator key", "bar"),
    _key(0x6D, "VK_SUBTRACT", "Subtract key", "minus"),
    _key(0x6E, "VK_DECIMAL", "Decimal key", "period"),
    _key(0x6F, "VK_DIVIDE", "Divide key", "slash"),
]

_STANDARD_KEYS = MappingProxyType({key.value: key for key in _STANDARD})


def standard_keys() -> Mapping[int, WindowsKey]:
    """Return the read-only table of virtual key codes 0x01 to 0x6F."""
    return _STANDARD_KEYS