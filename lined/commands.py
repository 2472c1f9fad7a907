"""Command pattern implementation of the modal key bindings.

Each row of the mode transition table is an EditorCommand registered
under (mode, key type, key value). `dispatch` looks up the command for the
current mode and applies it to the editor state.
"""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .constants import EditorConstants
from .keyboard import KeyType
from .state import Mode

if TYPE_CHECKING:
    from .keyboard import KeyEvent
    from .state import EditorState


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, state: 'EditorState', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            state: Editor state to mutate
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, state: 'EditorState', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the document."""
        self._move(state)
        return False

    @abstractmethod
    def _move(self, state: 'EditorState'):
        """Perform the movement."""
        pass


class UpLineCommand(MovementCommand):
    def _move(self, state):
        state.move_up()


class DownLineCommand(MovementCommand):
    def _move(self, state):
        state.move_down()


class LeftCharCommand(MovementCommand):
    def _move(self, state):
        state.move_left()


class RightCharCommand(MovementCommand):
    def _move(self, state):
        state.move_right()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, state: 'EditorState', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the document."""
        self._edit(state, key_event)
        return True

    @abstractmethod
    def _edit(self, state: 'EditorState', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class DeleteLineCommand(EditCommand):
    def _edit(self, state, key_event):
        state.buffer.delete_line(state.cursor.row)
        state.cursor.col = 0
        state.clamp_cursor()


class PasteLineCommand(EditCommand):
    def _edit(self, state, key_event):
        state.buffer.insert_line_after(state.cursor.row, state.clipboard)
        state.cursor.row += 1
        state.clamp_cursor()


class OpenLineCommand(EditCommand):
    """Open an empty line below. Stays in Normal mode."""

    def _edit(self, state, key_event):
        state.buffer.insert_line_after(state.cursor.row, "")
        state.cursor.row += 1
        state.cursor.col = 0


class BackspaceCommand(EditCommand):
    """Erase left of the cursor. Never joins with the previous line."""

    def _edit(self, state, key_event):
        if state.cursor.col > 0:
            state.buffer.delete_char_before(state.cursor.row, state.cursor.col)
            state.cursor.col -= 1


class InsertNewlineCommand(EditCommand):
    def _edit(self, state, key_event):
        state.buffer.split_line(state.cursor.row, state.cursor.col)
        state.cursor.row += 1
        state.cursor.col = 0


class InsertTextCommand(EditCommand):
    def execute(self, state: 'EditorState', key_event: 'KeyEvent') -> bool:
        # Control and non-ASCII characters are ignored
        if not key_event.is_printable:
            return False
        return super().execute(state, key_event)

    def _edit(self, state, key_event):
        state.buffer.insert_char(state.cursor.row, state.cursor.col, key_event.value)
        state.cursor.col += 1


class StateCommand(EditorCommand):
    """Base class for commands that change editor state but not the text."""

    def execute(self, state: 'EditorState', key_event: 'KeyEvent') -> bool:
        self._apply(state)
        return False

    @abstractmethod
    def _apply(self, state: 'EditorState'):
        pass


class EnterInsertCommand(StateCommand):
    def _apply(self, state):
        state.mode = Mode.INSERT


class ExitInsertCommand(StateCommand):
    def _apply(self, state):
        state.mode = Mode.NORMAL


class CopyLineCommand(StateCommand):
    def _apply(self, state):
        state.clipboard = state.buffer.copy_line(state.cursor.row)


class QuitCommand(StateCommand):
    def _apply(self, state):
        state.quit_requested = True


CommandKey = Tuple[Mode, KeyType, str]


class CommandRegistry:
    """Registry for mapping (mode, key) combinations to commands."""

    def __init__(self):
        self._commands: Dict[CommandKey, EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Normal mode: movement
        self.register((Mode.NORMAL, KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((Mode.NORMAL, KeyType.SPECIAL, 'down'), DownLineCommand())
        self.register((Mode.NORMAL, KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((Mode.NORMAL, KeyType.SPECIAL, 'right'), RightCharCommand())

        # Normal mode: line commands
        self.register((Mode.NORMAL, KeyType.REGULAR, EditorConstants.KEY_ENTER_INSERT), EnterInsertCommand())
        self.register((Mode.NORMAL, KeyType.REGULAR, EditorConstants.KEY_DELETE_LINE), DeleteLineCommand())
        self.register((Mode.NORMAL, KeyType.REGULAR, EditorConstants.KEY_COPY_LINE), CopyLineCommand())
        self.register((Mode.NORMAL, KeyType.REGULAR, EditorConstants.KEY_PASTE_LINE), PasteLineCommand())
        self.register((Mode.NORMAL, KeyType.REGULAR, EditorConstants.KEY_OPEN_LINE), OpenLineCommand())
        self.register((Mode.NORMAL, KeyType.REGULAR, EditorConstants.KEY_QUIT), QuitCommand())

        # Insert mode
        self.register((Mode.INSERT, KeyType.SPECIAL, 'escape'), ExitInsertCommand())
        self.register((Mode.INSERT, KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((Mode.INSERT, KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

    def register(self, key: CommandKey, command: EditorCommand):
        """Register a command for a mode and key combination."""
        self._commands[key] = command

    def get_command(self, mode: Mode, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a mode and key combination."""
        command = self._commands.get((mode, key_type, value))
        if command is None and mode == Mode.INSERT and key_type == KeyType.REGULAR:
            return self._insert_text
        return command

    def execute(self, state: 'EditorState', key_event: 'KeyEvent') -> bool:
        """Execute the command bound to the key in the current mode.

        Returns:
            True if the document was modified
        """
        command = self.get_command(state.mode, key_event.key_type, key_event.value)
        if command:
            return command.execute(state, key_event)
        # Unbound keys are ignored in both modes
        return False


_default_registry: Optional[CommandRegistry] = None


def get_registry() -> CommandRegistry:
    """Get the shared default registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = CommandRegistry()
    return _default_registry


def dispatch(state: 'EditorState', key_event: 'KeyEvent',
             registry: Optional[CommandRegistry] = None) -> 'EditorState':
    """Apply one key event to the state according to its mode.

    The state is updated in place and returned so calls can be chained.
    """
    (registry or get_registry()).execute(state, key_event)
    return state


def is_quit_key(key_event: 'KeyEvent') -> bool:
    return key_event.key_type == KeyType.REGULAR and key_event.value == EditorConstants.KEY_QUIT
