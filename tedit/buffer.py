from dataclasses import dataclass


@dataclass
class CursorPosition:
    row: int = 0
    column: int = 0


def load_document(text: str) -> list[str]:
    """Split text on line feeds into the initial list of lines.

    An empty string yields a single empty line, never an empty list.
    """
    return text.split("\n")


class TextBuffer:
    """Ordered sequence of lines that always holds at least one line.

    Edit primitives take the position they act on and return the cursor
    position implied by the edit. Positions are expected to be valid;
    passing an out-of-range row or column is a caller bug.
    """

    def __init__(self, lines: list[str] | None = None):
        self._lines: list[str] = list(lines) if lines else [""]

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(load_document(text))

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def line(self, row: int) -> str:
        return self._lines[row]

    def line_count(self) -> int:
        return len(self._lines)

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def text(self) -> str:
        return "\n".join(self._lines)

    def insert_char(self, row: int, col: int, ch: str) -> CursorPosition:
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        return CursorPosition(row, col + len(ch))

    def delete_char_before(self, row: int, col: int) -> CursorPosition:
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[:col - 1] + line[col:]
            return CursorPosition(row, col - 1)
        if row == 0:
            return CursorPosition(0, 0)

        # Join with the previous line; the cursor lands on the join point
        tail = self._lines.pop(row)
        join_column = len(self._lines[row - 1])
        self._lines[row - 1] += tail
        return CursorPosition(row - 1, join_column)

    def split_line(self, row: int, col: int) -> CursorPosition:
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        return CursorPosition(row + 1, 0)
