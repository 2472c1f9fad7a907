"""Main editor controller."""

import logging
from typing import Optional

from . import persistence
from .commands import CommandRegistry, dispatch, is_quit_key
from .config import Settings
from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .state import EditorState
from .terminal import TerminalInterface
from .view import BufferView

logger = logging.getLogger(__name__)


class Editor:
    """Modal editor session for a single file."""

    def __init__(self, filename: Optional[str] = None, settings: Optional[Settings] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.settings = settings or Settings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.state = EditorState(filename=filename)
        self.view = BufferView(self.state, self.terminal)
        self.command_registry = CommandRegistry()
        self.running = False
        self.saved: Optional[bool] = None  # Result of the save on quit

    def load_file(self, filename: str):
        """Load a file into the editor, replacing the buffer."""
        self.state.filename = filename
        self.state.buffer = persistence.load(filename)
        self.state.clamp_cursor()

    def save_file(self) -> bool:
        """Write the buffer back to the file it was loaded from."""
        if not self.state.filename:
            return False
        return persistence.save(self.state.filename, self.state.buffer)

    def run(self):
        """Run the main editor loop until quit, then save."""
        self.terminal.setup()
        self.running = True
        try:
            with self.terminal.term.cbreak():
                # Ctrl-C/Ctrl-Z/Ctrl-S are keys here, not signals or flow control
                old_tty = self.terminal.disable_signal_keys()
                try:
                    while self.running:
                        self._draw()
                        key_event = self._read_key_event()
                        if key_event:
                            self._handle_key_event(key_event)
                finally:
                    self.terminal.restore_tty(old_tty)
        finally:
            self.terminal.cleanup()

        if self.state.quit_requested:
            self.saved = self.save_file()
            if not self.saved:
                logger.warning(f"Save failed for {self.state.filename}")

    def _read_key_event(self) -> Optional[KeyEvent]:
        """Read the next key, turning a stray SIGINT into an ordinary Ctrl-C key."""
        try:
            return self.keyboard.get_key_event(timeout=None)
        except KeyboardInterrupt:
            logger.debug("SIGINT received, treating as Ctrl-C")
            return KeyEvent(key_type=KeyType.CTRL, value='c', raw='\x03', is_ctrl=True)

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # Legacy behaviour: the quit key wins before the mode is consulted
        if self.settings.legacy_quit and is_quit_key(key_event):
            self.state.quit_requested = True
        else:
            dispatch(self.state, key_event, self.command_registry)

        if self.state.quit_requested:
            self.running = False

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.view.render()
        if self.view.too_small:
            self._draw_error()
            return
        self.terminal.draw_frame(
            self.view.lines,
            self.view.status_line,
            self.view.visual_cursor_y,
            self.view.visual_cursor_x,
        )

    def _draw_error(self):
        """Draw error message when terminal is too small."""
        self.terminal.draw_error_message(
            EditorConstants.TERMINAL_TOO_SMALL_MESSAGE.format(
                EditorConstants.MIN_TERMINAL_COLUMNS, EditorConstants.MIN_TERMINAL_ROWS),
            EditorConstants.CURRENT_SIZE_MESSAGE.format(self.view.num_columns, self.view.num_rows)
        )
