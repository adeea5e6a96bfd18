"""Edit-buffer handling for prnote.

This package builds, persists and parses the pull request buffer:
- constants: Marker text, candidate comment characters, file names
- models: ParsedMessage
- comment_char: detect_comment_char, resolve_comment_char
- template: generate_template, render_history, load_pr_template
- parser: format_buffer, find_title, find_body, parse_message
- buffer: BufferStore, get_buffer_file, prepare_buffer
"""

# Constants
from prnote.message.constants import (
    COMMENT_CHAR_CANDIDATES,
    DEFAULT_COMMENT_CHAR,
    scissors_marker,
)

# Models
from prnote.message.models import ParsedMessage

# Comment character
from prnote.message.comment_char import (
    detect_comment_char,
    resolve_comment_char,
)

# Template generation
from prnote.message.template import (
    find_pr_template,
    generate_template,
    load_pr_template,
    render_commit,
    render_history,
    wrap_text,
)

# Parsing
from prnote.message.parser import (
    find_body,
    find_title,
    format_buffer,
    parse_message,
    strip_blank_lines,
)

# Persistence
from prnote.message.buffer import (
    BufferStore,
    get_buffer_file,
    load_or_create,
    prepare_buffer,
)


__all__ = [
    # Constants
    "COMMENT_CHAR_CANDIDATES",
    "DEFAULT_COMMENT_CHAR",
    "scissors_marker",
    # Models
    "ParsedMessage",
    # Comment character
    "detect_comment_char",
    "resolve_comment_char",
    # Template
    "find_pr_template",
    "generate_template",
    "load_pr_template",
    "render_commit",
    "render_history",
    "wrap_text",
    # Parser
    "find_body",
    "find_title",
    "format_buffer",
    "parse_message",
    "strip_blank_lines",
    # Buffer
    "BufferStore",
    "get_buffer_file",
    "load_or_create",
    "prepare_buffer",
]
