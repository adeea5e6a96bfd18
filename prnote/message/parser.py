"""Parser for the edited pull request buffer.

Contains:
- strip_blank_lines: Drop leading and trailing blank lines
- format_buffer: Cut the buffer at the scissors marker and trim it
- find_title: First line of a formatted buffer
- find_body: Everything after the first line, trimmed
- parse_message: format_buffer + find_title + find_body in one call
"""

from prnote.message.constants import DEFAULT_COMMENT_CHAR, scissors_marker
from prnote.message.models import ParsedMessage


def _is_blank(line: str) -> bool:
    return not line.strip()


def strip_blank_lines(lines: list[str]) -> list[str]:
    """Remove runs of blank lines at the start and end.

    Blank runs between non-blank lines are kept exactly as they are.

    Args:
        lines: Lines without trailing newlines.

    Returns:
        A new list with the outer blank runs removed.
    """
    start = 0
    end = len(lines)
    while start < end and _is_blank(lines[start]):
        start += 1
    while end > start and _is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]


def format_buffer(text: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> str:
    """Strip the scissors section and outer blank lines from a buffer.

    Every line is kept until one is exactly the scissors marker; the marker
    and everything after it are dropped.

    Args:
        text: Raw buffer content as saved by the editor.
        comment_char: Comment character the marker was written with.

    Returns:
        The remaining text, without a trailing newline.
    """
    marker = scissors_marker(comment_char)
    kept = []
    for line in text.splitlines():
        if line == marker:
            break
        kept.append(line)
    return "\n".join(strip_blank_lines(kept))


def find_title(stripped: str) -> str:
    """Return the first line of a formatted buffer, or '' if it is empty."""
    if not stripped:
        return ""
    return stripped.split("\n", 1)[0]


def find_body(stripped: str) -> str:
    """Return the lines after the title with outer blank lines removed."""
    lines = stripped.split("\n")
    if len(lines) <= 1:
        return ""
    return "\n".join(strip_blank_lines(lines[1:]))


def parse_message(text: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> ParsedMessage:
    """Parse a raw buffer into a title and body."""
    stripped = format_buffer(text, comment_char)
    return ParsedMessage(title=find_title(stripped), body=find_body(stripped))
