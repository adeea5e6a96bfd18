"""Commit history queries.

Contains:
- CommitEntry: One commit of a range, as shown in the edit buffer
- get_last_commit_message: Full message of the most recent commit
- get_commit_range: Commits on head that are not on base
"""

from dataclasses import dataclass

from prnote.git.runner import _run_git_command
from prnote.git.exceptions import GitError

# Field and record separators for --format output
_FIELD_SEP = "\x00"
_RECORD_SEP = "---COMMIT_SEP---"


@dataclass(frozen=True)
class CommitEntry:
    """A single commit rendered in the buffer's history section."""

    short_hash: str
    author: str
    relative_date: str
    subject: str
    body: str = ""


def get_last_commit_message() -> str:
    """Get the subject, a blank line and the body of the most recent commit.

    Returns:
        The commit message, or an empty string if the repo has no commits.
    """
    try:
        return _run_git_command(["log", "-1", "--format=%s%n%n%b"])
    except GitError:
        return ""


def _parse_log_output(output: str) -> list[CommitEntry]:
    """Parse ``git log`` output produced with the record/field separators."""
    entries = []
    for record in output.split(_RECORD_SEP):
        record = record.strip("\n")
        if not record.strip():
            continue
        fields = record.split(_FIELD_SEP)
        # Pad missing trailing fields (e.g. empty body)
        fields += [""] * (5 - len(fields))
        short_hash, author, relative_date, subject, body = fields[:5]
        entries.append(
            CommitEntry(
                short_hash=short_hash.strip(),
                author=author,
                relative_date=relative_date,
                subject=subject,
                body=body.strip("\n"),
            )
        )
    return entries


def get_commit_range(base: str, head: str) -> list[CommitEntry]:
    """Get the commits reachable from head but not from base.

    Uses a symmetric difference with --cherry-pick so commits whose
    equivalent patch is already on base are left out.

    Args:
        base: The branch the pull request targets.
        head: The branch the pull request comes from.

    Returns:
        Commits newest first, or an empty list if the range cannot be resolved.
    """
    fmt = "%x00".join(["%h", "%aN", "%ar", "%s", "%b"]) + _RECORD_SEP
    try:
        output = _run_git_command([
            "log",
            "--no-color",
            "--cherry-pick",
            "--right-only",
            f"--format={fmt}",
            f"{base}...{head}",
        ])
    except GitError:
        # Unknown base (e.g. never fetched); the history is informational only
        return []
    return _parse_log_output(output)
