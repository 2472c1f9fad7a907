"""Loading and saving the edited file.

Files are newline-delimited text. They are read and written as latin-1 with
newline translation disabled, so each byte is one character and bytes the
editor never touched are written back unchanged.
"""

import logging

from .buffer import LineBuffer

logger = logging.getLogger(__name__)

ENCODING = "latin-1"


def load(path: str) -> LineBuffer:
    """Read `path` into a LineBuffer.

    A missing, unreadable or empty file yields a buffer with one empty
    line; this never raises.

    Args:
        path: File to read.

    Returns:
        The loaded buffer.
    """
    try:
        with open(path, 'r', encoding=ENCODING, newline='') as f:
            content = f.read()
    except FileNotFoundError:
        logger.debug(f"{path} does not exist, starting a new document")
        return LineBuffer()
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        return LineBuffer()

    lines = content.split('\n')
    # A final newline terminates the last line rather than starting a new one
    if lines and lines[-1] == "":
        lines.pop()
    logger.debug(f"Loaded {len(lines)} lines from {path}")
    return LineBuffer(lines)


def save(path: str, buffer: LineBuffer) -> bool:
    """Overwrite `path` with the buffer, each line followed by a newline.

    Args:
        path: File to write.
        buffer: Buffer to write.

    Returns:
        True if the write succeeded, False otherwise.
    """
    try:
        with open(path, 'w', encoding=ENCODING, newline='') as f:
            for line in buffer:
                f.write(line)
                f.write('\n')
    except OSError as e:
        logger.warning(f"Could not save {path}: {e}")
        return False
    logger.debug(f"Saved {len(buffer)} lines to {path}")
    return True
