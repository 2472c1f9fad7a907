#!/usr/bin/env python3
"""lined - A minimal modal line editor.

Usage:
    python main.py <filename>

Normal mode:
    Arrow keys: Move cursor
    i: Insert mode
    d: Delete line
    y: Copy line
    p: Paste line below
    o: Open empty line below
    q: Save and quit

Insert mode:
    Type to insert text
    Backspace: Delete character
    Enter: Split line
    Esc: Back to normal mode
"""

import sys
from lined.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
