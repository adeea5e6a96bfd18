"""Git integration for prnote.

This package wraps the git command line:
- exceptions: GitError
- runner: _run_git_command, get_repo_root, get_git_dir
- config: get_config_value, get_git_editor
- branch: get_branch, get_remote_url, get_default_branch, push_branch
- log: CommitEntry, get_last_commit_message, get_commit_range
"""

# Exceptions
from prnote.git.exceptions import GitError

# Runner utilities
from prnote.git.runner import (
    _run_git_command,
    get_git_dir,
    get_repo_root,
)

# Config lookups
from prnote.git.config import (
    get_config_value,
    get_git_editor,
)

# Branch utilities
from prnote.git.branch import (
    get_branch,
    get_default_branch,
    get_remote_url,
    push_branch,
)

# History utilities
from prnote.git.log import (
    CommitEntry,
    get_commit_range,
    get_last_commit_message,
)


__all__ = [
    # Exceptions
    "GitError",
    # Runner
    "_run_git_command",
    "get_git_dir",
    "get_repo_root",
    # Config
    "get_config_value",
    "get_git_editor",
    # Branch
    "get_branch",
    "get_default_branch",
    "get_remote_url",
    "push_branch",
    # Log
    "CommitEntry",
    "get_commit_range",
    "get_last_commit_message",
]
