"""Edit-buffer template generation.

Contains:
- wrap_text: Wrap text to a width with indentation
- render_commit: Render one commit of the history section
- render_history: Render the whole commit range
- generate_template: Build the marker, help text and history section
- find_pr_template: Locate the repository's pull request template
- load_pr_template: Read the pull request template, if any
"""

import textwrap
from pathlib import Path
from typing import Optional

from prnote.git import CommitEntry, get_commit_range
from prnote.message.constants import (
    DEFAULT_COMMENT_CHAR,
    GUIDANCE_LINES,
    HISTORY_INDENT,
    HISTORY_WIDTH,
    MARKER_HELP_LINES,
    PR_TEMPLATE_PATHS,
    scissors_marker,
)


def wrap_text(text: str, width: int = HISTORY_WIDTH, initial_indent: str = "", subsequent_indent: str = "") -> str:
    """Wrap text to specified width.

    Args:
        text: Text to wrap.
        width: Maximum line width.
        initial_indent: Indent for first line.
        subsequent_indent: Indent for subsequent lines.

    Returns:
        Wrapped text.
    """
    return textwrap.fill(
        text,
        width=width,
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
        break_long_words=False,
        break_on_hyphens=False,
    )


def render_commit(entry: CommitEntry) -> str:
    """Render a commit as a header line plus its indented, wrapped message.

    Example output:
        1a2b3c4 (Jane Doe, 2 days ago)
           Add retry support to the uploader

           Uploads are retried three times before giving up.
    """
    lines = [f"{entry.short_hash} ({entry.author}, {entry.relative_date})"]

    message = entry.subject
    if entry.body.strip():
        message += "\n\n" + entry.body

    for line in message.splitlines():
        if not line.strip():
            lines.append("")
            continue
        # Keep the line's own indentation (lists, code) inside the 3-column indent
        own_indent = line[: len(line) - len(line.lstrip())]
        indent = HISTORY_INDENT + own_indent
        lines.append(wrap_text(line.strip(), HISTORY_WIDTH, indent, indent))

    return "\n".join(lines)


def render_history(commits: list[CommitEntry]) -> str:
    """Render all commits of a range separated by blank lines."""
    if not commits:
        return f"{HISTORY_INDENT}(no commits)"
    return "\n\n".join(render_commit(entry) for entry in commits)


def generate_template(
    base: str,
    head: str,
    prepend: str = "",
    comment_char: str = DEFAULT_COMMENT_CHAR,
    commits: Optional[list[CommitEntry]] = None,
) -> str:
    """Build the buffer text: prepend, scissors marker, help and history.

    Everything from the marker down is informational and is cut off again
    when the buffer is parsed.

    Args:
        base: Branch the pull request targets.
        head: Branch the pull request comes from.
        prepend: Text placed above the marker (recovered message or PR template).
        comment_char: Comment character for the marker and help lines.
        commits: Commits to list; looked up with git when not given.

    Returns:
        The template text, ending with a newline.
    """
    if commits is None:
        commits = get_commit_range(base, head)

    parts = []
    if prepend:
        parts.append(prepend)

    parts.append(scissors_marker(comment_char))
    parts.extend(f"{comment_char} {line}" for line in MARKER_HELP_LINES)
    parts.append("")
    parts.append(f"Requesting a pull to {base} from {head}")
    parts.append("")
    parts.extend(GUIDANCE_LINES)
    parts.append("")
    parts.append("Changes:")
    parts.append("")
    parts.append(render_history(commits))

    return "\n".join(parts) + "\n"


def find_pr_template(repo_root: Path) -> Optional[Path]:
    """Return the first pull request template found under repo_root."""
    for relative in PR_TEMPLATE_PATHS:
        candidate = repo_root / relative
        if candidate.is_file():
            return candidate
    return None


def load_pr_template(repo_root: Path) -> str:
    """Read the repository's pull request template.

    Returns:
        The template text with trailing whitespace removed, or '' if the
        repository has none.
    """
    template_file = find_pr_template(repo_root)
    if template_file is None:
        return ""
    return template_file.read_text(encoding="utf-8").rstrip()
