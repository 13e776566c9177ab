import pytest

from relinput.keymap import (
    LINUX_KEYS,
    EventType,
    KeyNotFoundError,
    LinuxKey,
    get_linux_key_detail,
    get_linux_key_detail_from_event_input,
)


def test_event_type_wire_values():
    assert [int(t) for t in EventType] == [0, 1, 2, 3]
    assert EventType(3) is EventType.KEY


def test_escape_key_detail():
    key = get_linux_key_detail(53)
    assert key == LinuxKey("Esc", 53, "Esc", 0x1B, "Escape")


def test_key_without_event_input():
    key = get_linux_key_detail(50)
    assert key.constant == "`"
    assert key.event_input == ""
    assert key.windows_key == 0


def test_unknown_code_raises():
    with pytest.raises(KeyNotFoundError):
        get_linux_key_detail(999)


def test_unknown_event_input_raises():
    with pytest.raises(KeyNotFoundError):
        get_linux_key_detail_from_event_input("no_such_key")


def test_table_values_match_codes():
    for code, key in LINUX_KEYS.items():
        assert key.value == code
        assert get_linux_key_detail(code) is key


@pytest.mark.parametrize("event_input", ["Escape", "shift", "space", "a", "F12", "Return"])
def test_event_input_round_trip(event_input):
    key = get_linux_key_detail_from_event_input(event_input)
    assert key.event_input == event_input
    assert get_linux_key_detail(key.value) == key


def test_every_event_input_resolves_to_same_name():
    for key in LINUX_KEYS.values():
        found = get_linux_key_detail_from_event_input(key.event_input)
        assert found.event_input == key.event_input


def test_key_is_immutable():
    key = get_linux_key_detail(53)
    with pytest.raises(AttributeError):
        key.value = 1
    assert key.value == 53
    assert get_linux_key_detail(53).value == 53