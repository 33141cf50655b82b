"""Pre-flight check that the working tree has no uncommitted changes."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Union

from .errors import DirtyWorkingTree
from .logging_utils import log


def git_status_porcelain(cwd: Optional[Union[str, Path]] = None) -> Optional[str]:
    """
    Output of `git status --porcelain`, or None when it cannot be determined
    (git missing, not a repository).
    """
    try:
        result = subprocess.run(
            ["git", "status", "--porcelain"],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        log(f"git status failed: {e}", logging.DEBUG)
        return None
    if result.returncode != 0:
        log(f"git status exited {result.returncode}: {result.stderr.strip()}", logging.DEBUG)
        return None
    return result.stdout


def check_git_status(cwd: Optional[Union[str, Path]] = None) -> None:
    """
    Refuse to run over uncommitted changes.

    Raises:
        DirtyWorkingTree: If `git status --porcelain` reports anything
    """
    status = git_status_porcelain(cwd)
    if status is None:
        log(
            "Unable to check git status. Make sure to save your work before translating.",
            logging.WARNING,
        )
        return
    if status.strip():
        raise DirtyWorkingTree(
            "Uncommitted changes detected.\n"
            "Please commit your changes before translating to preserve state.\n\n"
            'Run: git add . && git commit -m "your message"'
        )
