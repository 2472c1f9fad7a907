"""lined - A minimal modal line editor."""

__version__ = "0.1.0"

from .buffer import LineBuffer
from .state import EditorState, Cursor, Mode
from .viewport import Viewport
from .view import BufferView
from .commands import dispatch

__all__ = [
    'LineBuffer',
    'EditorState',
    'Cursor',
    'Mode',
    'Viewport',
    'BufferView',
    'dispatch',
]
