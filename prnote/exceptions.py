"""Exception classes for prnote.

Contains all exception classes raised while composing and submitting a
pull request:
- PrnoteError: Base exception for prnote errors
- ConfigError: Configuration could not be resolved
- NotGitHubRepoError: The origin remote is not hosted on GitHub
- ProtectedBranchError: Submission attempted from a trunk branch
- PushFailedError: Pushing the branch before submission failed
- EditorError: The editor could not be launched
- EmptyTitleError: The edited message has no title
- SubmissionFailedError: The PR-creation command failed
- UnsupportedPlatformError: Open/copy requested on an unknown OS

Only EmptyTitleError and SubmissionFailedError leave the edit buffer on
disk for the next run.
"""


class PrnoteError(Exception):
    """Base exception for prnote errors."""

    pass


class ConfigError(PrnoteError):
    """Raised when configuration (e.g. the comment character) is unusable."""

    pass


class NotGitHubRepoError(PrnoteError):
    """Raised when the origin remote does not point at GitHub."""

    pass


class ProtectedBranchError(PrnoteError):
    """Raised when running on master/main or another protected branch."""

    pass


class PushFailedError(PrnoteError):
    """Raised when ``git push`` fails before submission."""

    pass


class EditorError(PrnoteError):
    """Raised when the editor binary cannot be started."""

    pass


class EmptyTitleError(PrnoteError):
    """Raised when the edited buffer yields an empty title."""

    pass


class SubmissionFailedError(PrnoteError):
    """Raised when the PR-creation command exits with an error."""

    pass


class UnsupportedPlatformError(PrnoteError):
    """Raised when opening or copying a URL on an unsupported OS."""

    pass
