from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional

from . import __version__


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _git_root_for(path: Path) -> Optional[Path]:
    top = _run_git(["rev-parse", "--show-toplevel"], cwd=path)
    if not top:
        return None
    root = Path(top).resolve()
    return root if root.exists() else None


def _checkout_root() -> Path:
    # The directory holding the lined/ package in a source checkout
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    try:
        return importlib.metadata.version("lined")
    except importlib.metadata.PackageNotFoundError:
        return __version__


def get_version_string() -> str:
    # Running from our own checkout: append the short commit hash. An
    # installed copy inside some other repository reports the plain version.
    version = get_version()
    here = Path(__file__).resolve().parent
    root = _git_root_for(here)
    if root is None or root != _checkout_root():
        return version
    commit = _run_git(["rev-parse", "--short=7", "HEAD"], cwd=root)
    return f"{version} ({commit})" if commit else version
