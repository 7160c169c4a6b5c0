"""Subprocess execution utilities."""

import logging
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)


class SubprocessError(Exception):
    """Raised when subprocess fails."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = ""):
        message = f"Command failed: {' '.join(cmd)} (exit {returncode})"
        if stderr:
            message += f"\n{stderr}"
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr


def run_command(
    cmd: list[str],
    check: bool = True,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess[bytes]:
    """
    Run a subprocess command with all three standard streams piped.

    Stdin is opened but never written to. Stdout and stderr are drained
    completely so the child cannot stall on a full pipe.

    Args:
        cmd: Command and arguments as list (safe, no shell injection)
        check: Raise exception on non-zero exit
        timeout: Seconds to wait for the child (None waits forever)

    Returns:
        CompletedProcess with raw stdout/stderr bytes

    Raises:
        SubprocessError: If command fails and check=True
        OSError: If the executable cannot be spawned
        subprocess.TimeoutExpired: If timeout elapses first
    """
    logger.debug(f"Running: {' '.join(cmd)}")

    result = subprocess.run(
        cmd,
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=False,
        timeout=timeout,
    )

    logger.debug(f"Exit code: {result.returncode}")

    if check and result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise SubprocessError(cmd, result.returncode, stderr)

    return result


def run_command_output(cmd: list[str], timeout: Optional[float] = None) -> str:
    """
    Run command and return stdout.

    Args:
        cmd: Command and arguments as list
        timeout: Seconds to wait for the child (None waits forever)

    Returns:
        stdout decoded as UTF-8 (invalid bytes replaced), not stripped

    Raises:
        SubprocessError: If command fails
    """
    result = run_command(cmd, check=True, timeout=timeout)
    return result.stdout.decode("utf-8", errors="replace")
