"""Line buffer holding the document being edited."""

from typing import Iterator, Optional

from .constants import EditorConstants


def is_printable(ch: str) -> bool:
    """Return True for a single printable ASCII character (codes 32-126)."""
    return (
        len(ch) == 1
        and EditorConstants.PRINTABLE_MIN <= ord(ch) <= EditorConstants.PRINTABLE_MAX
    )


class LineBuffer:
    """Ordered sequence of text lines.

    The buffer never holds zero lines: an empty document, or one whose last
    line was deleted, is a single empty line.

    Row and column arguments are preconditions. Callers (the commands) clamp
    the cursor before calling in, so a bad index is a programming error and
    trips an assertion rather than raising a user-facing exception.
    """

    def __init__(self, lines: Optional[list[str]] = None):
        self._lines: list[str] = list(lines) if lines else [""]

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, row: int) -> str:
        return self._lines[row]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"LineBuffer({self._lines!r})"

    @property
    def lines(self) -> list[str]:
        """A copy of the buffer contents."""
        return list(self._lines)

    def _check_row(self, row: int) -> None:
        assert 0 <= row < len(self._lines), f"row {row} out of range"

    def _check_col(self, row: int, col: int) -> None:
        self._check_row(row)
        assert 0 <= col <= len(self._lines[row]), f"col {col} out of range on row {row}"

    def insert_char(self, row: int, col: int, ch: str) -> None:
        """Insert one printable character into line `row` at `col`."""
        self._check_col(row, col)
        assert is_printable(ch), f"not a printable ASCII character: {ch!r}"
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]

    def delete_char_before(self, row: int, col: int) -> None:
        """Delete the character left of `col`. Does nothing at column 0."""
        self._check_col(row, col)
        if col == 0:
            return
        line = self._lines[row]
        self._lines[row] = line[:col - 1] + line[col:]

    def split_line(self, row: int, col: int) -> None:
        """Break line `row` at `col`, moving the tail onto a new line below."""
        self._check_col(row, col)
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])

    def delete_line(self, row: int) -> None:
        """Remove line `row`; the last remaining line is cleared instead."""
        self._check_row(row)
        if len(self._lines) > 1:
            del self._lines[row]
        else:
            self._lines[0] = ""

    def copy_line(self, row: int) -> str:
        self._check_row(row)
        return self._lines[row]

    def insert_line_after(self, row: int, content: str) -> None:
        """Insert `content` as a new line directly below `row`."""
        self._check_row(row)
        assert "\n" not in content, "a line cannot contain a newline"
        self._lines.insert(row + 1, content)
