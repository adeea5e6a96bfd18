"""Edit-buffer persistence and recovery.

The buffer lives at <git-dir>/PULLREQ_EDITMSG. It is removed when the
command finishes, however it finishes, unless the run asked to keep it
(failed submission or empty title). A kept buffer is picked up by the next
run and its message is carried over above a freshly generated history.

Contains:
- get_buffer_file: Path of the buffer inside the git directory
- BufferStore: Context manager owning the buffer file for one run
- prepare_buffer: Write the fresh or recovered buffer content
"""

import signal
import threading
from pathlib import Path
from typing import Optional

from prnote.git import CommitEntry
from prnote.message.constants import BUFFER_FILE_NAME, DEFAULT_COMMENT_CHAR
from prnote.message.parser import format_buffer
from prnote.message.template import generate_template


def get_buffer_file(git_dir: Path) -> Path:
    """Return path to the edit buffer.

    Args:
        git_dir: The repository's .git directory.

    Returns:
        Path to PULLREQ_EDITMSG.
    """
    return git_dir / BUFFER_FILE_NAME


def load_or_create(path: Path) -> bool:
    """Return True if a buffer left by a failed run exists at path."""
    return path.exists()


def _exit_on_signal(signum, _frame):
    raise SystemExit(128 + signum)


class BufferStore:
    """Owns the buffer file for the duration of a ``with`` block.

    Attributes:
        path: Location of the buffer file.
        exists: Whether a buffer from an earlier, failed run was found on entry.
    """

    def __init__(self, path: Path):
        self.path = path
        self.exists = False
        self._keep = False
        self._previous_sigterm = None

    def __enter__(self) -> "BufferStore":
        self.exists = load_or_create(self.path)
        self._install_sigterm_handler()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self._restore_sigterm_handler()
        if not self._keep:
            self.discard()
        return False

    @property
    def kept(self) -> bool:
        """True once keep() has been called."""
        return self._keep

    def read(self) -> str:
        """Return the current buffer content."""
        return self.path.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        """Replace the buffer content."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")

    def keep(self) -> None:
        """Leave the buffer on disk when the block exits."""
        self._keep = True

    def discard(self) -> None:
        """Delete the buffer file if present."""
        self.path.unlink(missing_ok=True)

    def _install_sigterm_handler(self) -> None:
        # Turn SIGTERM into SystemExit so __exit__ still runs
        if threading.current_thread() is not threading.main_thread():
            return
        self._previous_sigterm = signal.signal(signal.SIGTERM, _exit_on_signal)

    def _restore_sigterm_handler(self) -> None:
        if self._previous_sigterm is None:
            return
        signal.signal(signal.SIGTERM, self._previous_sigterm)
        self._previous_sigterm = None


def prepare_buffer(
    store: BufferStore,
    base: str,
    head: str,
    comment_char: str = DEFAULT_COMMENT_CHAR,
    pr_template: str = "",
    commits: Optional[list[CommitEntry]] = None,
) -> str:
    """Write the buffer for this run and return its content.

    A fresh buffer starts with two blank lines for the title, followed by
    the pull request template (if any) and the generated section. When a
    buffer from a failed run exists, its message (everything above the old
    marker) is kept verbatim and the generated section is rebuilt under it.

    Args:
        store: The entered BufferStore.
        base: Branch the pull request targets.
        head: Branch the pull request comes from.
        comment_char: Resolved comment character.
        pr_template: Pull request template text for a fresh buffer.
        commits: Commit range to list; looked up with git when not given.

    Returns:
        The text written to the buffer.
    """
    recovered = ""
    if store.exists:
        recovered = format_buffer(store.read(), comment_char)

    if recovered:
        content = generate_template(base, head, recovered, comment_char, commits)
    else:
        content = "\n\n" + generate_template(base, head, pr_template, comment_char, commits)

    store.write(content)
    return content
