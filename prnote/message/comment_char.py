"""Comment character resolution.

Git lets a repository change the character that marks comment lines in
commit messages (core.commentChar). The scissors marker and helper lines in
the buffer use the same character.
"""

from prnote.exceptions import ConfigError
from prnote.git import get_config_value, get_last_commit_message
from prnote.message.constants import COMMENT_CHAR_CANDIDATES, DEFAULT_COMMENT_CHAR


def detect_comment_char(message: str) -> str:
    """Pick the first candidate character that starts no line of message.

    When every candidate is used, the last one tried is returned.

    Args:
        message: A full commit message (subject, blank line, body).

    Returns:
        The selected comment character.
    """
    lines = message.splitlines()
    candidate = ""
    for candidate in COMMENT_CHAR_CANDIDATES:
        if not any(line.startswith(candidate) for line in lines):
            break
    return candidate


def resolve_comment_char() -> str:
    """Resolve the comment character for the current repository.

    Returns:
        The configured character, '#' when unset, or the auto-detected one
        when core.commentChar is 'auto'.

    Raises:
        ConfigError: If no character could be determined.
    """
    configured = get_config_value("core.commentChar")

    if not configured:
        comment_char = DEFAULT_COMMENT_CHAR
    elif configured == "auto":
        comment_char = detect_comment_char(get_last_commit_message())
    else:
        comment_char = configured

    if not comment_char:
        raise ConfigError("Unable to determine the comment character (core.commentChar).")
    return comment_char
