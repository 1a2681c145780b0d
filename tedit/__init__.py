"""tedit - A minimal terminal text editor."""

from .buffer import TextBuffer, CursorPosition, load_document
from .cursor import CursorController
from .viewport import Viewport
from .render import Frame, render_frame
from .session import EditorSession

__all__ = [
    'TextBuffer',
    'CursorPosition',
    'load_document',
    'CursorController',
    'Viewport',
    'Frame',
    'render_frame',
    'EditorSession',
]
