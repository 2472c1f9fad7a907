"""Projection of the editor state onto the screen."""

from typing import Optional

from .constants import EditorConstants
from .state import EditorState


def format_status(state: EditorState) -> str:
    """Status line text: file name, 1-based line and column, mode name."""
    return EditorConstants.STATUS_FORMAT.format(
        filename=state.filename or "[No Name]",
        line=state.cursor.row + 1,
        col=state.cursor.col + 1,
        mode=state.mode.value,
    )


class BufferView:
    """Computes what the terminal shows for an EditorState.

    `num_rows` and `num_columns` are the full terminal size, status line
    included. When a terminal is attached, `render` re-reads its size on
    every pass, which is how resizes are picked up.
    """
    num_rows: int = 24
    num_columns: int = 80
    lines: list[str]
    status_line: str = ""
    visual_cursor_y: int = 0
    visual_cursor_x: int = 0

    def __init__(self, state: EditorState, terminal: Optional[object] = None):
        self.state = state
        self.terminal = terminal
        self.lines = []

    @property
    def too_small(self) -> bool:
        return (self.num_rows < EditorConstants.MIN_TERMINAL_ROWS
                or self.num_columns < EditorConstants.MIN_TERMINAL_COLUMNS)

    def render(self):
        """Scroll the viewport to the cursor and rebuild the visible frame."""
        if self.terminal is not None:
            self.num_rows, self.num_columns = self.terminal.size

        state = self.state
        viewport = state.viewport
        viewport.scroll(state.cursor.row, state.cursor.col, self.num_rows, self.num_columns)

        left = viewport.col_offset
        right = left + self.num_columns
        self.lines = [
            state.buffer[row][left:right]
            for row in viewport.visible_rows_range(len(state.buffer), self.num_rows)
        ]
        self.status_line = format_status(state)
        self.visual_cursor_y, self.visual_cursor_x = viewport.to_screen(
            state.cursor.row, state.cursor.col)
