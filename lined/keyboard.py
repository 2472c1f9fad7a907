"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum

from .constants import EditorConstants


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key string from the terminal
    is_ctrl: bool = False
    is_sequence: bool = False

    @property
    def is_printable(self) -> bool:
        return (
            self.key_type == KeyType.REGULAR
            and len(self.value) == 1
            and EditorConstants.PRINTABLE_MIN <= ord(self.value) <= EditorConstants.PRINTABLE_MAX
        )


# Named keys the editor understands; anything else in angle brackets is
# passed through as an unknown special key and ignored by the dispatcher.
SPECIAL_KEYS = {'left', 'right', 'up', 'down', 'enter', 'backspace'}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a key token into a KeyEvent.

        Args:
            key: curtsies key name such as '<UP>' or '<Ctrl-j>', or a raw
                single character

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-j>', '<ESC>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-')
            base = parts[-1]
            mods = set(parts[:-1])

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if base in ('esc', 'escape') and not mods:
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-J / Ctrl-M are newline and carriage return
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str, is_sequence=True)
                # Ctrl-H is the BS code some terminals send for backspace
                if base == 'h':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str, is_sequence=True)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
            if base in SPECIAL_KEYS and not mods:
                return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)
            return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=key_str, is_sequence=True)

        if len(key_str) == 1:
            o = ord(key_str)
            if o == EditorConstants.ESCAPE_CODE:
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if o in EditorConstants.BACKSPACE_CODES:
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if key_str in ('\n', '\r'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        # Regular character (printable or not; the dispatcher filters)
        return KeyEvent(
            key_type=KeyType.REGULAR,
            value=key_str,
            raw=key_str,
            is_sequence=False
        )
