"""Scrolling and buffer-to-screen coordinate translation."""

from dataclasses import dataclass


@dataclass
class Viewport:
    """Top-left buffer coordinate shown on screen.

    `visible_rows` and `visible_cols` are the full terminal size. The last
    row belongs to the status line and the cursor is kept off the last
    column, so after `scroll`:

        row_offset <= cursor_row <= row_offset + visible_rows - 2
        col_offset <= cursor_col <= col_offset + visible_cols - 2
    """

    row_offset: int = 0
    col_offset: int = 0

    @staticmethod
    def _follow(offset: int, position: int, extent: int) -> int:
        extent = max(2, extent)
        if position < offset:
            return position
        if position >= offset + extent - 1:
            return position - extent + 2
        return offset

    def scroll(self, cursor_row: int, cursor_col: int, visible_rows: int, visible_cols: int) -> None:
        """Shift the offsets by the minimum needed to keep the cursor visible."""
        self.row_offset = self._follow(self.row_offset, cursor_row, visible_rows)
        self.col_offset = self._follow(self.col_offset, cursor_col, visible_cols)

    def to_screen(self, row: int, col: int) -> tuple[int, int]:
        """Translate a buffer coordinate to a (y, x) screen coordinate."""
        return row - self.row_offset, col - self.col_offset

    def visible_rows_range(self, num_lines: int, visible_rows: int) -> range:
        """Buffer rows that land in the text area, clipped to the buffer."""
        text_rows = max(1, visible_rows - 1)
        return range(self.row_offset, min(num_lines, self.row_offset + text_rows))
