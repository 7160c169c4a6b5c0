"""Git repository probes."""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from gitroot.errors import NotInRepositoryError
from gitroot.probes.tools import SubprocessError, run_command_output

GIT_TOPLEVEL_CMD = ("git", "rev-parse", "--show-toplevel")

logger = logging.getLogger(__name__)


def find_repository_root(timeout: Optional[float] = None) -> str:
    """
    Find git repository root for the current working directory.

    Runs ``git rev-parse --show-toplevel`` once and returns its output
    verbatim, trailing newline included.

    Args:
        timeout: Seconds to wait for git (None waits forever)

    Returns:
        Repository root as printed by git

    Raises:
        NotInRepositoryError: If git exits non-zero or cannot be run
    """
    try:
        root = run_command_output(list(GIT_TOPLEVEL_CMD), timeout=timeout)
    except (SubprocessError, OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Not in git repo: {e}")
        raise NotInRepositoryError() from e

    logger.debug(f"Git root: {root.rstrip()}")
    return root


def find_repository_path(timeout: Optional[float] = None) -> Path:
    """
    Find git repository root as a Path.

    Same lookup as find_repository_root(), with the line terminator removed.

    Raises:
        NotInRepositoryError: If git exits non-zero or cannot be run
    """
    return Path(find_repository_root(timeout=timeout).rstrip("\r\n"))
