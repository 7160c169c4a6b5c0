"""Runtime probes."""

from gitroot.probes.repo import GIT_TOPLEVEL_CMD, find_repository_path, find_repository_root
from gitroot.probes.tools import SubprocessError, run_command, run_command_output

__all__ = [
    "GIT_TOPLEVEL_CMD",
    "SubprocessError",
    "find_repository_path",
    "find_repository_root",
    "run_command",
    "run_command_output",
]
