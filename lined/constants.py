"""Constants and configuration for the lined editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Character classes
    PRINTABLE_MIN = 32  # Space
    PRINTABLE_MAX = 126  # Tilde
    ESCAPE_CODE = 27
    BACKSPACE_CODES = (127, 8)  # DEL and BS both erase backwards

    # Normal mode command keys
    KEY_ENTER_INSERT = "i"
    KEY_DELETE_LINE = "d"
    KEY_COPY_LINE = "y"
    KEY_PASTE_LINE = "p"
    KEY_OPEN_LINE = "o"
    KEY_QUIT = "q"

    # Terminal requirements: one text row plus the status row
    MIN_TERMINAL_ROWS = 2
    MIN_TERMINAL_COLUMNS = 2

    # Status line
    STATUS_FORMAT = "{filename} - Line {line}, Col {col}  -- {mode}"
    TERMINAL_TOO_SMALL_MESSAGE = "Terminal too small! Need at least {} x {}."
    CURRENT_SIZE_MESSAGE = "Current size: {} x {}."

    # Messages
    USAGE = "Usage: {prog} <filename>"
    SAVE_FAILED_MESSAGE = "lined: warning: could not save {filename}"
