import os
import stat

import pytest

from relinput.xdotool import MouseButton, Xdotool

_FAKE_XDOTOOL = """#!/bin/sh
echo "$DISPLAY|$*" >> "$XDO_LOG"
printf '%s' "$XDO_OUTPUT"
exit "${XDO_STATUS:-0}"
"""


@pytest.fixture
def fake(tmp_path, monkeypatch):
    """Put a recording stand-in for xdotool first on PATH."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "xdotool"
    script.write_text(_FAKE_XDOTOOL)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    log = tmp_path / "calls.log"
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.setenv("XDO_LOG", str(log))
    monkeypatch.setenv("XDO_OUTPUT", "")
    monkeypatch.setenv("XDO_STATUS", "0")

    class Fake:
        def output(self, text):
            monkeypatch.setenv("XDO_OUTPUT", text)

        def status(self, code):
            monkeypatch.setenv("XDO_STATUS", str(code))

        def calls(self):
            if not log.exists():
                return []
            return log.read_text().splitlines()

    return Fake()


def test_key_down_runs_xdotool_on_display(fake):
    fake.output("X=7\nY=9\n")
    xdo = Xdotool(":3")
    xdo.key_down("a")
    assert xdo.get_position() == (7, 9)
    assert fake.calls()[0] == ":3|keydown a"


def test_key_up_runs_xdotool(fake):
    fake.output("X=1\nY=2\n")
    xdo = Xdotool(":0")
    xdo.key_up("Return")
    assert xdo.get_position() == (1, 2)
    assert fake.calls()[0] == ":0|keyup Return"


@pytest.mark.parametrize(
    "action, expected",
    [
        (lambda x: x.mouse_move_relative(5, -3), "mousemove_relative -- 5 -3"),
        (lambda x: x.mouse_move_absolute("10", "20"), "mousemove -- 10 20"),
        (lambda x: x.mouse_down(MouseButton.RIGHT), "mousedown -- 3"),
        (lambda x: x.mouse_up(MouseButton.LEFT), "mouseup -- 1"),
        (lambda x: x.wheel_up(), "click 4"),
        (lambda x: x.wheel_down(), "click 5"),
    ],
)
def test_background_actions(fake, action, expected):
    thread = action(Xdotool(":0"))
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert fake.calls() == [f":0|{expected}"]


def test_get_position_parses_shell_output(fake):
    fake.output("X=100\nY=200\nSCREEN=0\nWINDOW=42\n")
    assert Xdotool(":0").get_position() == (100, 200)
    assert fake.calls() == [":0|getmouselocation --shell"]


def test_get_position_without_output(fake):
    assert Xdotool(":0").get_position() == (0, 0)


def test_get_window_geometry_parses_fields(fake):
    fake.output("WIDTH=1280 HEIGHT=720")
    assert Xdotool(":0").get_window_geometry() == (1280, 720)
    assert fake.calls()[0].startswith(":0|getdisplaygeometry")


def test_failure_is_reported_on_stderr(fake, capsys):
    fake.status(1)
    Xdotool(":0").key_down("a")
    assert "Failed to input: exit status 1" in capsys.readouterr().err


def test_missing_xdotool_is_reported(tmp_path, monkeypatch, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    assert Xdotool(":0").get_position() == (0, 0)
    assert "Failed to input" in capsys.readouterr().err