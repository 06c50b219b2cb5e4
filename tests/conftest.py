"""Shared fakes for the terminal-facing parts of the app."""

from __future__ import annotations

import contextlib

import pytest
from blessed.keyboard import Keystroke


class FakeKeyboard:
    """poll() hands out scripted keys; '' entries end a tick's drain."""

    def __init__(self, keys=()):
        self.keys = list(keys)

    def poll(self) -> str:
        if self.keys:
            return self.keys.pop(0)
        return ""


class FakeTerminal:
    """Just enough of blessed.Terminal for terminal_session()."""

    kind = "xterm-256color"

    def __init__(self, keys=()):
        self.keys = [k if isinstance(k, Keystroke) else Keystroke(k) for k in keys]
        self.in_cbreak = False
        self.cbreak_entered = 0

    @contextlib.contextmanager
    def cbreak(self):
        self.in_cbreak = True
        self.cbreak_entered += 1
        try:
            yield
        finally:
            self.in_cbreak = False

    def inkey(self, timeout=None):
        if self.keys:
            return self.keys.pop(0)
        return Keystroke("")


@pytest.fixture
def fake_keyboard():
    return FakeKeyboard


@pytest.fixture
def fake_terminal():
    return FakeTerminal
