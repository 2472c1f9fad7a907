"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import sys
import termios
import blessed
from typing import Optional

from curtsies.events import PasteEvent, SigIntEvent

logger = logging.getLogger(__name__)

# blessed key names mapped onto the curtsies tokens KeyboardHandler parses
_BLESSED_KEY_TOKENS = {
    'KEY_UP': '<UP>',
    'KEY_DOWN': '<DOWN>',
    'KEY_LEFT': '<LEFT>',
    'KEY_RIGHT': '<RIGHT>',
    'KEY_BACKSPACE': '<BACKSPACE>',
    'KEY_DELETE': '<DELETE>',
    'KEY_ENTER': '<Ctrl-j>',
    'KEY_ESCAPE': '<ESC>',
}

CTRL_C_TOKEN = '<Ctrl-c>'


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False
        # Keys from a paste that have not been handed out yet
        self._pending_keys: list[str] = []

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # SIGINT arrives as an event and Ctrl-S/Ctrl-Q reach the
                # editor instead of stopping output
                self._curtsies_input = Input(  # type: ignore
                    keynames='curtsies',
                    sigint_event=True,
                    disable_terminal_start_stop=True,
                )
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception as e:
                # curtsies may fail to start on limited terminals; blessed
                # inkey() is used for input instead.
                logger.warning(f"curtsies input unavailable, using blessed: {e}")
                self._curtsies_input = None
                self._curtsies_active = False

    def disable_signal_keys(self):
        """Deliver Ctrl-C, Ctrl-Z, Ctrl-S and Ctrl-Q as plain keys.

        Returns:
            The previous tty attributes for `restore_tty`, or None if stdin
            is not a tty.
        """
        try:
            old_settings = termios.tcgetattr(sys.stdin)
            new_settings = list(old_settings)
            new_settings[0] &= ~(termios.IXON | termios.IXOFF)
            new_settings[3] &= ~(termios.ISIG | getattr(termios, 'IEXTEN', 0))
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
            return old_settings
        except (termios.error, AttributeError, OSError, ValueError) as e:
            logger.debug(f"Could not adjust tty flags: {e}")
            return None

    def restore_tty(self, old_settings):
        """Restore attributes saved by `disable_signal_keys`."""
        if old_settings is None:
            return
        try:
            termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
        except (termios.error, OSError, ValueError) as e:
            logger.warning(f"Could not restore tty flags: {e}")

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception as e:
                # Teardown must not mask the error that ended the session
                logger.warning(f"Failed to leave curtsies raw mode: {e}")
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='')

    def draw_frame(self, lines: list[str], status: str, cursor_y: int, cursor_x: int):
        """Paint text rows, the reverse-video status line and the cursor.

        Args:
            lines: Text for screen rows 0..len(lines)-1, already clipped
            status: Status line text
            cursor_y: Cursor row on screen (0-based)
            cursor_x: Cursor column on screen (0-based)
        """
        width = self.width
        self.clear_screen()

        for y, line in enumerate(lines):
            print(self.term.move(y, 0) + line[:width], end='')

        status_text = status[:width].ljust(width)
        print(self.term.move(self.term.height - 1, 0)
              + self.term.reverse + status_text + self.term.normal, end='')

        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def draw_error_message(self, message1: str, message2: str = ""):
        """Draw an error message in the middle of the screen.

        Args:
            message1: Primary error message
            message2: Secondary information
        """
        self.clear_screen()
        center_y = self.term.height // 2
        for offset, message in enumerate((message1, message2)):
            if not message:
                continue
            text = message[:self.width]
            left = max(0, (self.width - len(text)) // 2)
            print(self.term.move(max(0, center_y - 1 + offset), left) + text, end='')
        print('', end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Uses curtsies Input when available; otherwise reads with blessed
        and translates special keys to the same curtsies-style names. A
        paste is handed out one key per call.

        Args:
            timeout: Timeout in seconds (None for blocking)

        Returns:
            Key token string, or None on timeout.
        """
        if self._pending_keys:
            return self._pending_keys.pop(0)
        if self._curtsies_input is not None:
            evt = self._curtsies_input.send(timeout)  # type: ignore
            if evt is None:
                return None
            if isinstance(evt, SigIntEvent):
                return CTRL_C_TOKEN
            if isinstance(evt, PasteEvent):
                self._pending_keys.extend(str(key) for key in evt.events)
                return self._pending_keys.pop(0) if self._pending_keys else None
            return str(evt)
        keystroke = self.term.inkey(timeout=timeout)
        if not keystroke:
            return None
        if keystroke.is_sequence:
            return _BLESSED_KEY_TOKENS.get(keystroke.name, f"<{keystroke.name}>")
        return str(keystroke)

    @property
    def size(self) -> tuple[int, int]:
        """Full terminal size as (rows, columns)."""
        return self.term.height, self.term.width

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width
