"""Git branch, remote and push utilities.

Contains:
- get_branch: Get the current branch name
- get_remote_url: Get the URL of a remote
- get_default_branch: Get the remote's default branch
- push_branch: Push a branch and set its upstream
"""

from prnote.git.runner import _run_git_command
from prnote.git.exceptions import GitError


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD' if in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        # Detached HEAD state
        return "HEAD"
    return branch


def get_remote_url(remote: str = "origin") -> str:
    """Get the fetch URL configured for a remote.

    Args:
        remote: Name of the remote.

    Returns:
        The remote URL, or an empty string if the remote does not exist.
    """
    try:
        return _run_git_command(["remote", "get-url", remote])
    except GitError:
        return ""


def get_default_branch(remote: str = "origin", fallback: str = "main") -> str:
    """Get the default branch of a remote from its symbolic HEAD.

    Args:
        remote: Name of the remote.
        fallback: Branch returned when the remote HEAD is not known locally.

    Returns:
        The default branch name without the remote prefix.
    """
    try:
        ref = _run_git_command(["symbolic-ref", "--short", f"refs/remotes/{remote}/HEAD"])
    except GitError:
        return fallback
    prefix = f"{remote}/"
    if ref.startswith(prefix):
        return ref[len(prefix):]
    return ref or fallback


def push_branch(branch: str, remote: str = "origin") -> str:
    """Push a branch to a remote and set it as the upstream.

    Args:
        branch: The local branch to push.
        remote: The remote to push to.

    Returns:
        Output of the push command.

    Raises:
        GitError: If the push fails.
    """
    return _run_git_command(["push", "--set-upstream", remote, branch])
