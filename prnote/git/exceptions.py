"""Git-related exception classes."""

from typing import Optional


class GitError(Exception):
    """Custom exception for git-related errors.

    Attributes:
        returncode: Exit status of the failed git process, if it ran.
        stderr: What git printed on stderr.
    """

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
