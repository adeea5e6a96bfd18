"""Git configuration and variable lookups.

Contains:
- get_config_value: Read a single git config value
- get_git_editor: Ask git which editor it would launch
"""

from prnote.git.runner import _run_git_command
from prnote.git.exceptions import GitError


def get_config_value(key: str) -> str:
    """Read a git config value.

    Args:
        key: The config key, e.g. ``core.commentChar``.

    Returns:
        The configured value, or an empty string if the key is unset.

    Raises:
        GitError: If git fails for another reason, e.g. a broken config file.
    """
    try:
        return _run_git_command(["config", "--get", key])
    except GitError as e:
        # git config exits 1 for unset keys
        if e.returncode == 1:
            return ""
        raise


def get_git_editor() -> str:
    """Return the editor git itself would use (``git var GIT_EDITOR``).

    Returns:
        The editor command string, or an empty string if git reports none.
    """
    try:
        return _run_git_command(["var", "GIT_EDITOR"])
    except GitError:
        return ""
