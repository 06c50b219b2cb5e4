#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import contextlib
import logging

from .color import CLEAR_SCREEN, CURSOR_HOME, RESET, STARTUP_COLOR

logger = logging.getLogger(__name__)


class KeyboardPoller:
    """Non-blocking key source on top of a blessed Terminal."""

    def __init__(self, term):
        self.term = term

    def poll(self) -> str:
        """Return one pending key, or '' when nothing is waiting."""
        keystroke = self.term.inkey(timeout=0)
        if not keystroke:
            return ''
        if keystroke.is_sequence:
            # Arrow keys and friends are not bound to anything.
            return keystroke.name or ''
        return str(keystroke)


def _write(out, text):
    out.write(text.encode('ascii'))
    out.flush()


@contextlib.contextmanager
def terminal_session(term, out):
    """
    Put the terminal in cbreak mode and clear the screen for drawing.

    Yields a KeyboardPoller. On any exit, including an exception raised
    while setting up the renderer, colors are reset, the screen is
    cleared, the cursor homed and the original terminal mode restored.
    """
    with term.cbreak():
        _write(out, CLEAR_SCREEN + STARTUP_COLOR)
        logger.debug("terminal session started (kind=%s)", term.kind)
        try:
            yield KeyboardPoller(term)
        finally:
            _write(out, RESET + CLEAR_SCREEN + CURSOR_HOME)
            logger.debug("terminal session restored")
