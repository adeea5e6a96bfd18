"""Constants shared by the edit-buffer generator and parser."""

# Characters tried, in order, when core.commentChar is "auto"
COMMENT_CHAR_CANDIDATES = ("#", ";", "@", "!", "$", "%", "^", "&", "|", ":")

DEFAULT_COMMENT_CHAR = "#"

SCISSORS = "------------------------ >8 ------------------------"

MARKER_HELP_LINES = (
    "Do not modify or remove the line above.",
    "Everything below it will be ignored.",
)

GUIDANCE_LINES = (
    "Write a message for this pull request. The first line",
    "of text is the title and the rest is the description.",
)

HISTORY_WIDTH = 78
HISTORY_INDENT = "   "

BUFFER_FILE_NAME = "PULLREQ_EDITMSG"

# Looked up relative to the repository root, first match wins
PR_TEMPLATE_PATHS = (
    ".github/PULL_REQUEST_TEMPLATE.md",
    ".github/pull_request_template.md",
    "PULL_REQUEST_TEMPLATE.md",
    "pull_request_template.md",
    "docs/PULL_REQUEST_TEMPLATE.md",
    "docs/pull_request_template.md",
)


def scissors_marker(comment_char: str) -> str:
    """Return the marker line for the given comment character."""
    return f"{comment_char} {SCISSORS}"
