"""lined CLI entry point.

Allows running via `python -m lined` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from .constants import EditorConstants
from .version import get_version_string


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: a filename, or --version
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if not args:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "lined"
        if prog in ("__main__.py", "-c"):
            prog = "lined"
        print(EditorConstants.USAGE.format(prog=prog), file=sys.stderr)
        return 1

    # Lazy import to avoid importing UI deps for --version
    from .config import load_settings
    from .editor import Editor
    from .log import configure_logging

    settings = load_settings()
    configure_logging(settings.log_level)

    filename = args[0]
    editor = Editor(filename, settings=settings)
    editor.load_file(filename)
    editor.run()

    if editor.saved is False:
        print(EditorConstants.SAVE_FAILED_MESSAGE.format(filename=filename), file=sys.stderr)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
