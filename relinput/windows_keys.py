"""Windows virtual key codes from F1 upwards, and lookups over the whole table."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from relinput.keymap import EventType, KeyNotFoundError
from relinput.winkeys_standard import WindowsKey, standard_keys


def _key(value: int, constant: str, description: str, event_input: str = "") -> WindowsKey:
    return WindowsKey(constant, value, description, EventType.KEY, event_input)


_OEM_MISC = "Used for miscellaneous characters; it can vary by keyboard."

_EXTENDED = [
    *(
        _key(0x6F + number, f"VK_F{number}", f"F{number} key", f"F{number}")
        for number in range(1, 25)
    ),
    _key(0x90, "VK_NUMLOCK", "NUM LOCK key", "Num_Lock"),
    _key(0x91, "VK_SCROLL", "SCROLL LOCK key", "Scroll_Lock"),
    _key(0xA0, "VK_LSHIFT", "Left SHIFT key", "shift"),
    _key(0xA1, "VK_RSHIFT", "Right SHIFT key", "shift"),
    _key(0xA2, "VK_LCONTROL", "Left CONTROL key", "ctrl"),
    _key(0xA3, "VK_RCONTROL", "Right CONTROL key", "ctrl"),
    _key(0xA4, "VK_LMENU", "Left MENU key", "Menu"),
    _key(0xA5, "VK_RMENU", "Right MENU key", "Menu"),
    _key(0xA6, "VK_BROWSER_BACK", "Browser Back key"),
    _key(0xA7, "VK_BROWSER_FORWARD", "Browser Forward key"),
    _key(0xA8, "VK_BROWSER_REFRESH", "Browser Refresh key"),
    _key(0xA9, "VK_BROWSER_STOP", "Browser Stop key"),
    _key(0xAA, "VK_BROWSER_SEARCH", "Browser Search key"),
    _key(0xAB, "VK_BROWSER_FAVORITES", "Browser Favorites key"),
    _key(0xAC, "VK_BROWSER_HOME", "Browser Start and Home key"),
    _key(0xAD, "VK_VOLUME_MUTE", "Volume Mute key"),
    _key(0xAE, "VK_VOLUME_DOWN", "Volume Down key"),
    _key(0xAF, "VK_VOLUME_UP", "Volume Up key"),
    _key(0xB0, "VK_MEDIA_NEXT_TRACK", "Next Track key"),
    _key(0xB1, "VK_MEDIA_PREV_TRACK", "Previous Track key"),
    _key(0xB2, "VK_MEDIA_STOP", "Stop Media key"),
    _key(0xB3, "VK_MEDIA_PLAY_PAUSE", "Play/Pause Media key"),
    _key(0xB4, "VK_LAUNCH_MAIL", "Start Mail key"),
    _key(0xB5, "VK_LAUNCH_MEDIA_SELECT", "Select Media key"),
    _key(0xB6, "VK_LAUNCH_APP1", "Start Application 1 key"),
    _key(0xB7, "VK_LAUNCH_APP2", "Start Application 2 key"),
    _key(0xBA, "VK_OEM_1", _OEM_MISC),
    _key(0xBB, "VK_OEM_PLUS", "For any country/region, the '+' key", "semicolon"),
    _key(0xBC, "VK_OEM_COMMA", "For any country/region, the ',' key", "comma"),
    _key(0xBD, "VK_OEM_MINUS", "For any country/region, the '-' key", "minus"),
    _key(0xBE, "VK_OEM_PERIOD", "For any country/region, the '.' key", "period"),
    _key(0xBF, "VK_OEM_2", _OEM_MISC),
    _key(0xC0, "VK_OEM_3", _OEM_MISC),
    _key(0xDB, "VK_OEM_4", _OEM_MISC, "parenleft"),
    _key(0xDC, "VK_OEM_5", _OEM_MISC, "backslash"),
    _key(0xDD, "VK_OEM_6", _OEM_MISC, "parenright"),
    _key(0xDE, "VK_OEM_7", _OEM_MISC, "caret"),
    _key(0xDF, "VK_OEM_8", _OEM_MISC),
    _key(0xE0, "", "Reserved"),
    _key(0xE1, "", "OEM specific"),
    _key(
        0xE2,
        "VK_OEM_102",
        "Either the angle bracket key or the backslash key on the RT 102-key keyboard",
        "underscore",
    ),
    _key(0xE5, "VK_PROCESSKEY", "IME PROCESS key"),
    _key(0xE6, "", "OEM specific"),
    _key(
        0xE7,
        "VK_PACKET",
        "Used to pass Unicode characters as if they were keystrokes. The VK_PACKET key "
        "is the low word of a 32-bit Virtual Key value used for non-keyboard input "
        "methods. For more information, see Remark in KEYBDINPUT, SendInput, "
        "WM_KEYDOWN, and WM_KEYUP",
    ),
    _key(0xE8, "", "Unassigned"),
    _key(0xF6, "VK_ATTN", "Attn key", "3270_Attn"),
    _key(0xF7, "VK_CRSEL", "CrSel key"),
    _key(0xF8, "VK_EXSEL", "ExSel key"),
    _key(0xF9, "VK_EREOF", "Erase EOF key"),
    _key(0xFA, "VK_PLAY", "Play key"),
    _key(0xFB, "VK_ZOOM", "Zoom key"),
    _key(0xFC, "VK_NONAME", "Reserved"),
    _key(0xFD, "VK_PA1", "PA1 key", "PA1"),
    _key(0xFE, "VK_OEM_CLEAR", "Clear key", "Clear"),
]

_EXTENDED_KEYS = MappingProxyType({key.value: key for key in _EXTENDED})
_ALL_KEYS = MappingProxyType(
    dict(sorted({**standard_keys(), **_EXTENDED_KEYS}.items()))
)


def _index_by_event_input(keys: Mapping[int, WindowsKey]) -> Mapping[str, WindowsKey]:
    # Where several codes share an event input, the lowest code wins.
    index: dict[str, WindowsKey] = {}
    for key in keys.values():
        index.setdefault(key.event_input, key)
    return MappingProxyType(index)


_BY_EVENT_INPUT = _index_by_event_input(_ALL_KEYS)


def extended_keys() -> Mapping[int, WindowsKey]:
    """Return the read-only table of virtual key codes 0x70 to 0xFE."""
    return _EXTENDED_KEYS


def all_windows_keys() -> Mapping[int, WindowsKey]:
    """Return the read-only table of every known virtual key code, in code order."""
    return _ALL_KEYS


def get_windows_key_detail(code: int) -> WindowsKey:
    """Return the key for a Windows virtual key code."""
    try:
        return _ALL_KEYS[code]
    except KeyError:
        raise KeyNotFoundError("NotFound") from None


def get_windows_key_detail_from_event_input(event_input: str) -> WindowsKey:
    """Return a key whose xdotool event input name is ``event_input``."""
    try:
        return _BY_EVENT_INPUT[event_input]
    except KeyError:
        raise KeyNotFoundError("NotFound") from None