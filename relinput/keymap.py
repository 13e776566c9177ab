"""Input event types and the table of Linux key codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType


class EventType(IntEnum):
    """Kind of input event carried on the wire."""

    MOUSE = 0
    MOUSE_MOVE = 1
    WHEEL = 2
    KEY = 3


class KeyNotFoundError(LookupError):
    """Raised when a key is not present in a key table."""


@dataclass(frozen=True)
class LinuxKey:
    """Details of one Linux key code."""

    constant: str
    value: int
    description: str
    windows_key: int = 0
    event_input: str = ""


def _k(value: int, name: str, event_input: str = "", windows_key: int = 0) -> LinuxKey:
    return LinuxKey(name, value, name, windows_key, event_input)


_KEYS = [
    _k(53, "Esc", "Escape", 0x1B),
    _k(122, "F1", "F1", 0x70),
    _k(120, "F2", "F2", 0x71),
    _k(99, "F3", "F3", 0x72),
    _k(118, "F4", "F4", 0x73),
    _k(96, "F5", "F5", 0x74),
    _k(97, "F6", "F6", 0x75),
    _k(98, "F7", "F7", 0x76),
    _k(100, "F8", "F8", 0x77),
    _k(101, "F9", "F9", 0x78),
    _k(109, "F10", "F10", 0x79),
    _k(103, "F11", "F11", 0x7A),
    _k(127, "F12", "F12", 0x7B),
    _k(105, "PrintScrn", "Print", 0x2A),
    _k(107, "Scroll Lock", "Scroll_Lock", 0x91),
    _k(113, "Pause", "Pause", 0x13),
    _k(50, "`"),
    _k(18, "1", "1", 0x31),
    _k(19, "2", "2", 0x32),
    _k(20, "3", "3", 0x33),
    _k(21, "4", "4", 0x34),
    _k(23, "5", "5", 0x35),
    _k(22, "6", "6", 0x36),
    _k(26, "7", "7", 0x37),
    _k(28, "8", "8", 0x38),
    _k(25, "9", "9", 0x39),
    _k(29, "0", "0", 0x30),
    _k(27, "-", "minus", 0x6D),
    _k(24, "="),
    _k(51, "Backspace", "BackSpace", 0x08),
    _k(114, "Insert", "Insert", 0x2D),
    _k(115, "Home", "Home", 0x24),
    _k(116, "Page Up", "Page_Up", 0x21),
    _k(71, "Num Lock", "Num_Lock", 0x90),
    _k(75, "KP /"),
    _k(67, "KP *"),
    _k(78, "KP -"),
    _k(48, "Tab", "Tab", 0x09),
    _k(12, "Q", "q", 0x51),
    _k(13, "W", "w", 0x57),
    _k(14, "E", "e", 0x45),
    _k(15, "R", "r", 0x52),
    _k(17, "T", "t", 0x54),
    _k(16, "Y", "y", 0x59),
    _k(32, "U", "u", 0x55),
    _k(34, "I", "i", 0x49),
    _k(31, "O", "o", 0x4F),
    _k(35, "P", "p", 0x50),
    _k(33, "[", "["),
    _k(30, "]", "]"),
    _k(36, "Return", "Return", 0x0D),
    _k(117, "Delete", "Delete", 0x2E),
    _k(119, "End", "End", 0x23),
    _k(121, "Page Down", "Page_Down", 0x22),
    _k(89, "KP 7"),
    _k(91, "KP 8"),
    _k(92, "KP 9"),
    _k(69, "KP +"),
    _k(57, "Caps Lock", "Caps_Lock", 0x14),
    _k(0, "A", "a", 0x41),
    _k(1, "S", "s", 0x53),
    _k(2, "D", "d", 0x44),
    _k(3, "F", "f", 0x46),
    _k(5, "G", "g", 0x47),
    _k(4, "H", "h", 0x48),
    _k(38, "J", "j", 0x4A),
    _k(40, "K", "k", 0x4B),
    _k(37, "L", "l", 0x4C),
    _k(41, ";", ";"),
    _k(39, "'", "'"),
    _k(86, "KP 4"),
    _k(87, "KP 5"),
    _k(88, "KP 6"),
    _k(56, "Shift Left", "shift", 0xA0),
    _k(6, "Z", "z", 0x5A),
    _k(7, "X", "x", 0x58),
    _k(8, "C", "c", 0x43),
    _k(9, "V", "v", 0x56),
    _k(11, "B", "b", 0x42),
    _k(45, "N", "n", 0x4D),
    _k(46, "M", "m", 0x53),
    _k(43, ",", "comma"),
    _k(47, ".", "period", 0x6E),
    _k(44, "/", "slash", 0x6F),
    _k(42, "\\", "backslash"),
    _k(62, "Cursor Up", "Up", 0x26),
    _k(83, "KP 1"),
    _k(84, "KP 2"),
    _k(85, "KP 3"),
    _k(76, "KP Enter"),
    _k(54, "Ctrl Left", "ctrl", 0xA2),
    _k(58, "Logo Left (-> Option)", "", 0x5B),
    _k(55, "Alt Left (-> Command)", "alt", 0x12),
    _k(49, "Space", "space", 0x20),
    _k(59, "Cursor Left", "Left", 0x25),
    _k(61, "Cursor Down", "Down", 0x28),
    _k(60, "Cursor Right", "Right", 0x27),
    _k(82, "KP 0"),
    _k(65, "KP ."),
]

LINUX_KEYS = MappingProxyType({key.value: key for key in _KEYS})
_LINUX_KEYS_BY_EVENT_INPUT = MappingProxyType({key.event_input: key for key in _KEYS})


def get_linux_key_detail(code: int) -> LinuxKey:
    """Return the key for a Linux key code."""
    try:
        return LINUX_KEYS[code]
    except KeyError:
        raise KeyNotFoundError("NotFound") from None


def get_linux_key_detail_from_event_input(event_input: str) -> LinuxKey:
    """Return the key whose xdotool event input name is ``event_input``."""
    try:
        return _LINUX_KEYS_BY_EVENT_INPUT[event_input]
    except KeyError:
        raise KeyNotFoundError("NotFound") from None