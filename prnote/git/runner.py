"""Git command runner and repository locations.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- get_git_dir: Get the absolute path of the repository's control directory
"""

import subprocess
from pathlib import Path

from prnote.git.exceptions import GitError

NOT_A_REPO_MESSAGE = "Not in a git repository. Please run this command from within a git repo."


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its stripped stdout.

    Args:
        args: List of arguments to pass to git.

    Raises:
        GitError: If git is missing or exits non-zero. The exit status and
            stderr are kept on the error so callers can tell failures apart.
    """
    command = ["git"] + args
    try:
        result = subprocess.run(command, capture_output=True, text=True, check=True)
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(
            f"Git command failed: {' '.join(command)}\n{stderr}",
            returncode=e.returncode,
            stderr=stderr,
        )
    return result.stdout.strip()


def _rev_parse(flag: str) -> Path:
    """Resolve a repository location, reporting a missing repo plainly."""
    try:
        return Path(_run_git_command(["rev-parse", flag]))
    except GitError as e:
        if e.returncode is None:
            raise
        raise GitError(NOT_A_REPO_MESSAGE, returncode=e.returncode, stderr=e.stderr)


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Raises:
        GitError: If not in a git repository.
    """
    return _rev_parse("--show-toplevel")


def get_git_dir() -> Path:
    """Get the absolute path of the .git directory (works inside worktrees too)."""
    return _rev_parse("--absolute-git-dir")
