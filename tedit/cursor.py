"""Cursor movement and edit dispatch over a TextBuffer."""

from .buffer import CursorPosition, TextBuffer


class CursorController:
    """Owns the (row, column) cursor and routes edits to the buffer.

    Horizontal moves never wrap across lines. Vertical moves clamp the
    column to the new line's length starting from the current column, so
    moving through a short line shortens the column for every later move
    too; there is no remembered "desired column".
    """

    def __init__(self, buffer: TextBuffer, position: CursorPosition | None = None):
        self.buffer = buffer
        self.position = position or CursorPosition()

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def column(self) -> int:
        return self.position.column

    def move_left(self):
        if self.position.column > 0:
            self.position.column -= 1

    def move_right(self):
        if self.position.column < self.buffer.line_length(self.position.row):
            self.position.column += 1

    def move_up(self):
        if self.position.row > 0:
            self.position.row -= 1
        self._clamp_column()

    def move_down(self):
        if self.position.row < self.buffer.line_count() - 1:
            self.position.row += 1
        self._clamp_column()

    def home(self):
        self.position.column = 0

    def end(self):
        self.position.column = self.buffer.line_length(self.position.row)

    def insert_char(self, ch: str):
        self.position = self.buffer.insert_char(self.position.row, self.position.column, ch)

    def backspace(self):
        self.position = self.buffer.delete_char_before(self.position.row, self.position.column)

    def enter(self):
        self.position = self.buffer.split_line(self.position.row, self.position.column)

    def _clamp_column(self):
        length = self.buffer.line_length(self.position.row)
        if self.position.column > length:
            self.position.column = length
