"""gitroot exception hierarchy with exit codes."""

# Exit code constants
EXIT_SUCCESS = 0  # Operation succeeded
EXIT_ERROR = 1  # Generic error / failure


class GitRootError(Exception):
    """Base exception for all gitroot errors."""

    def __init__(self, message: str, exit_code: int = EXIT_ERROR):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class NotInRepositoryError(GitRootError):
    """
    Current directory is not inside a usable git work tree.

    Raised for every failed root lookup (no repository, git missing,
    permission denied); git's own diagnostic is never part of the message.
    """

    exit_code = EXIT_ERROR

    def __init__(self, message: str = "Not in a valid git repo"):
        super().__init__(message, exit_code=self.exit_code)
