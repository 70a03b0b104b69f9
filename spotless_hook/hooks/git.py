"""
Git utilities for hooks.

Provides helpers for locating the working copy a hook belongs to.
"""

import subprocess
from pathlib import Path
from typing import Optional


def get_repo_root(cwd: Optional[Path] = None) -> Optional[Path]:
    """Get the root directory of the git repository containing cwd."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
        return Path(result.stdout.strip())
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None


def find_repo_root(start: Optional[Path] = None) -> Path:
    """
    Find the working copy root by walking up from start.

    Falls back to ``git rev-parse`` and finally to start itself, so the
    installer can report a missing repository on its own terms.
    """
    start = Path(start) if start else Path.cwd()
    current = start.resolve()

    while current != current.parent:
        if (current / ".git").is_dir():
            return current
        current = current.parent

    return get_repo_root(start) or start
