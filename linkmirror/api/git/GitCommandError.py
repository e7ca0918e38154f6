"""Git command failure (UNO: single exception)."""


class GitCommandError(OSError):
    """A git invocation failed, timed out or could not be started.

    Recoverable: callers downgrade it to a per-file error.
    """

    def __init__(self, message: str, returncode: int | None = None):
        """
        Args:
            message: Human-readable failure description
            returncode: Exit status of git; None if it never exited (timeout, missing binary)
        """
        super().__init__(message)
        self.returncode = returncode
