"""Per-run settings.

A Settings instance is built once when the command starts and handed to
the steps that need it.
"""

from dataclasses import dataclass
from pathlib import Path

from prnote import __version__
from prnote.git import get_git_dir, get_repo_root
from prnote.global_config import GlobalConfig, get_global_settings
from prnote.message import get_buffer_file

# Branches a pull request may never be opened from
DEFAULT_PROTECTED_BRANCHES = ("master", "main")


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for one prnote invocation."""

    prog_name: str
    version: str
    repo_root: Path
    git_dir: Path
    buffer_file: Path
    user_config: GlobalConfig

    @property
    def protected_branches(self) -> tuple[str, ...]:
        """master/main plus any branches listed in the user config."""
        extra = tuple(
            b for b in self.user_config.protected_branches if b not in DEFAULT_PROTECTED_BRANCHES
        )
        return DEFAULT_PROTECTED_BRANCHES + extra


def load_settings(prog_name: str = "prnote") -> Settings:
    """Build the settings for the repository in the current directory.

    Raises:
        GitError: If not inside a git repository.
        GlobalConfigError: If ~/.prnote/config.yaml is invalid.
    """
    repo_root = get_repo_root()
    git_dir = get_git_dir()
    return Settings(
        prog_name=prog_name,
        version=__version__,
        repo_root=repo_root,
        git_dir=git_dir,
        buffer_file=get_buffer_file(git_dir),
        user_config=get_global_settings(),
    )
