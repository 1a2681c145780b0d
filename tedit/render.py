from typing import NamedTuple

from .buffer import TextBuffer
from .constants import EditorConstants
from .cursor import CursorController
from .viewport import Viewport


class Frame(NamedTuple):
    lines: list[str]
    cursor_x: int
    cursor_y: int


def render_frame(buffer: TextBuffer, cursor: CursorController, viewport: Viewport,
                 end_marker: str = EditorConstants.END_OF_DOCUMENT_MARKER) -> Frame:
    """Plan one screen of output without touching any state.

    Returns exactly ``viewport.height`` lines. Rows past the end of the
    document show ``end_marker``. The cursor column is clamped to the
    viewport width; a cursor further right than that is drawn on the
    right edge.
    """
    lines: list[str] = []
    for offset in range(viewport.height):
        index = viewport.scroll + offset
        if index < buffer.line_count():
            lines.append(buffer.line(index)[:viewport.width])
        else:
            lines.append(end_marker)

    cursor_x = min(cursor.column, viewport.width)
    cursor_y = cursor.row - viewport.scroll
    return Frame(lines, cursor_x, cursor_y)
