"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from curtsies import Input
from curtsies.events import PasteEvent
from typing import Optional

from .render import Frame


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[Input] = None
        self._pending_keys: list[str] = []

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen)
        print(self.term.hide_cursor)
        print(self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            # Enter raw mode immediately so reads work
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen)
            print(self.term.normal_cursor)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None

    def format_status(self, text: str) -> str:
        """Pad a status bar text to the terminal width and style it."""
        width = self.term.width
        padded = text[:width].ljust(width)
        return self.term.bold_bright_black_on_black(padded)

    def draw_frame(self, frame: Frame, status_text: Optional[str] = None):
        """Draw a planned frame, an optional status bar and the cursor.

        Args:
            frame: Lines and cursor position produced by the render planner
            status_text: Status bar text drawn on the bottom row, or None
        """
        # Clear screen first
        print(self.term.home + self.term.clear, end='')

        for y, line in enumerate(frame.lines):
            print(self.term.move(y, 0) + line, end='')

        if status_text is not None:
            print(self.term.move(self.term.height - 1, 0) + self.format_status(status_text), end='')

        print(self.term.move(frame.cursor_y, frame.cursor_x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Keys curtsies has already read from the terminal are returned
        before it waits on stdin again, so a burst of input (key repeat,
        several escape sequences in one read) is delivered one key per
        call without stalling. A paste is split back into its keys.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived in time.
        """
        if self._pending_keys:
            return self._pending_keys.pop(0)
        if self._curtsies_input is None:
            return None
        evt = self._curtsies_input.send(timeout)
        if evt is None:
            return None
        if isinstance(evt, PasteEvent):
            self._pending_keys.extend(str(e) for e in evt.events)
            return self._pending_keys.pop(0) if self._pending_keys else None
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
