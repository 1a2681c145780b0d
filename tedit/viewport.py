"""Scrolling window onto the document."""


class Viewport:
    """Visible window of ``height`` rows and ``width`` columns.

    ``scroll`` is the index of the first document line on screen. It only
    ever moves vertically; lines wider than the viewport are truncated
    when rendered rather than panned.
    """

    def __init__(self, width: int, height: int, scroll: int = 0):
        self.width = max(0, width)
        self.height = max(0, height)
        self.scroll = max(0, scroll)

    def scroll_to_show_cursor(self, row: int):
        """Adjust scroll so that ``row`` lies inside the visible rows.

        After this call ``scroll <= row < scroll + height``. A zero-height
        viewport is anchored as if it had one row.
        """
        height = max(1, self.height)
        if row < self.scroll:
            self.scroll = row
        elif row >= self.scroll + height:
            self.scroll = row - height + 1

    def resize(self, width: int, height: int, row: int):
        """Set a new size and re-anchor on the cursor row."""
        self.width = max(0, width)
        self.height = max(0, height)
        self.scroll_to_show_cursor(row)
