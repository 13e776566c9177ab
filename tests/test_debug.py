import pytest

from relinput import debug


@pytest.fixture
def log_file(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "ON")
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG_PATH", str(path))
    return path


def test_enabled_only_for_exact_on(monkeypatch):
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "on")
    assert debug.debug_enabled() is False
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "ON")
    assert debug.debug_enabled() is True


def test_disabled_writes_nothing(tmp_path, monkeypatch):
    path = tmp_path / "never.log"
    monkeypatch.delenv("RELATIVE_INPUT_DEBUG", raising=False)
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG_PATH", str(path))
    assert debug.debugf("x %d", 1) == 0
    assert debug.debugln("x") == 0
    assert not path.exists()


def test_debug_path_from_env(log_file):
    assert debug.debug_path() == str(log_file)


def test_debugf_formats_and_appends(log_file):
    written = debug.debugf("move %d %d\n", 3, -4)
    assert log_file.read_text() == "move 3 -4\n"
    assert written == len("move 3 -4\n")
    debug.debugf("again")
    assert log_file.read_text() == "move 3 -4\nagain"


def test_debugf_without_args_keeps_percent(log_file):
    written = debug.debugf("100%")
    assert written == len("100%")
    assert log_file.read_text() == "100%"


def test_debugln_joins_with_spaces(log_file):
    written = debug.debugln("key", 27, True)
    assert log_file.read_text() == "key 27 True\n"
    assert written == len("key 27 True\n")


def test_unwritable_path_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "ON")
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG_PATH", str(tmp_path / "missing" / "f.log"))
    with pytest.raises(OSError):
        debug.debugln("x")