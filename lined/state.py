"""Editor state: mode, cursor and clipboard around a line buffer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .buffer import LineBuffer
from .viewport import Viewport


class Mode(Enum):
    """Editing modes. The value is the name shown on the status line."""
    NORMAL = "NORMAL"
    INSERT = "INSERT"


@dataclass
class Cursor:
    row: int = 0
    col: int = 0


@dataclass
class EditorState:
    """Everything one editing session mutates.

    A single instance is created at startup and passed explicitly to the
    command dispatcher and the view.
    """
    buffer: LineBuffer = field(default_factory=LineBuffer)
    cursor: Cursor = field(default_factory=Cursor)
    mode: Mode = Mode.NORMAL
    clipboard: str = ""
    viewport: Viewport = field(default_factory=Viewport)
    filename: Optional[str] = None
    quit_requested: bool = False

    @property
    def current_line(self) -> str:
        return self.buffer[self.cursor.row]

    def clamp_cursor(self) -> None:
        """Pull the cursor back inside the buffer after a structural edit."""
        last_row = len(self.buffer) - 1
        self.cursor.row = max(0, min(self.cursor.row, last_row))
        self.cursor.col = max(0, min(self.cursor.col, len(self.current_line)))

    def move_up(self) -> None:
        if self.cursor.row > 0:
            self.cursor.row -= 1
        # Keep the column valid on the (possibly shorter) new line
        self.cursor.col = min(self.cursor.col, len(self.current_line))

    def move_down(self) -> None:
        if self.cursor.row < len(self.buffer) - 1:
            self.cursor.row += 1
        self.cursor.col = min(self.cursor.col, len(self.current_line))

    def move_left(self) -> None:
        if self.cursor.col > 0:
            self.cursor.col -= 1

    def move_right(self) -> None:
        if self.cursor.col < len(self.current_line):
            self.cursor.col += 1
