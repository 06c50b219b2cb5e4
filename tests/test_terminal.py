"""Scoped terminal session and key polling."""

from __future__ import annotations

import io

import pytest
from blessed.keyboard import Keystroke

from ascii_cube_renderer.terminal import KeyboardPoller, terminal_session

ENTER = b"\x1b[2J\x1b[36m"
LEAVE = b"\x1b[0m\x1b[2J\x1b[H"


def test_poller_returns_plain_keys_then_nothing(fake_terminal) -> None:
    poller = KeyboardPoller(fake_terminal(["j", "q"]))
    assert [poller.poll(), poller.poll(), poller.poll()] == ["j", "q", ""]


def test_poller_names_special_keys(fake_terminal) -> None:
    up = Keystroke("\x1b[A", code=259, name="KEY_UP")
    assert KeyboardPoller(fake_terminal([up])).poll() == "KEY_UP"


def test_session_clears_and_restores(fake_terminal) -> None:
    term, out = fake_terminal(), io.BytesIO()

    with terminal_session(term, out) as keyboard:
        assert term.in_cbreak
        assert out.getvalue() == ENTER
        assert isinstance(keyboard, KeyboardPoller)

    assert not term.in_cbreak
    assert out.getvalue() == ENTER + LEAVE


def test_session_restores_on_error(fake_terminal) -> None:
    term, out = fake_terminal(), io.BytesIO()

    with pytest.raises(RuntimeError):
        with terminal_session(term, out):
            raise RuntimeError("boom")

    assert not term.in_cbreak
    assert out.getvalue().endswith(LEAVE)
