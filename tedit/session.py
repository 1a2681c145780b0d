"""Editing session state for the tedit editor.

An EditorSession owns the document, cursor and viewport of one editing
session. Commands are applied to it one at a time; after each command the
viewport is re-anchored on the cursor so the next frame always shows it.
"""

import logging
from typing import Optional

from .buffer import CursorPosition, TextBuffer
from .commands import EditorCommand
from .constants import EditorConstants
from .cursor import CursorController
from .render import Frame, render_frame
from .viewport import Viewport

logger = logging.getLogger(__name__)


class EditorSession:
    """Aggregate of buffer, cursor and viewport for a single session."""

    def __init__(self, text: str = "", width: int = 80, height: int = 24,
                 end_marker: str = EditorConstants.END_OF_DOCUMENT_MARKER):
        """Create a session over ``text``.

        Args:
            text: Initial document text, split on line feeds
            width: Viewport width in columns
            height: Viewport height in rows
            end_marker: Text shown on rows past the end of the document
        """
        self.buffer = TextBuffer.from_text(text)
        self.cursor = CursorController(self.buffer)
        self.viewport = Viewport(width, height)
        self.end_marker = end_marker
        self.exit_requested = False
        self.viewport.scroll_to_show_cursor(self.cursor.row)

    @classmethod
    def from_lines(cls, lines: list[str], position: Optional[CursorPosition] = None,
                   width: int = 80, height: int = 24, **kwargs) -> 'EditorSession':
        """Create a session from a list of lines and a starting cursor."""
        session = cls("\n".join(lines), width=width, height=height, **kwargs)
        if position is not None:
            session.cursor.position = CursorPosition(position.row, position.column)
            session.viewport.scroll_to_show_cursor(session.cursor.row)
        return session

    def apply(self, command: EditorCommand) -> bool:
        """Apply one command to completion and re-anchor the viewport.

        Returns:
            True if the document text changed
        """
        modified = command.execute(self)
        self.viewport.scroll_to_show_cursor(self.cursor.row)
        logger.debug(
            "applied %r: cursor=(%d, %d) scroll=%d lines=%d",
            command, self.cursor.row, self.cursor.column,
            self.viewport.scroll, self.buffer.line_count(),
        )
        return modified

    def render_frame(self) -> Frame:
        """Plan the next frame for the current state."""
        return render_frame(self.buffer, self.cursor, self.viewport, self.end_marker)
