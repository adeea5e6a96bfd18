"""Shared utility functions for the CLI: editor discovery and launching."""

import os
import shlex
import subprocess
from pathlib import Path
from typing import Optional

import typer

from prnote.exceptions import EditorError
from prnote.git import get_config_value, get_git_editor

FALLBACK_EDITOR = "vi"

# Extra arguments for editors known to need them when editing a message
_VIM_ARGS = ["-c", "set filetype=gitcommit textwidth=0 wrap linebreak"]
EDITOR_EXTRA_ARGS = {
    "vim": _VIM_ARGS,
    "nvim": _VIM_ARGS,
    "vi": _VIM_ARGS,
    "gvim": ["-f"] + _VIM_ARGS,
    "code": ["--wait"],
    "codium": ["--wait"],
    "subl": ["--wait"],
    "gedit": ["--wait"],
    "nano": ["--nowrap"],
}


def editor_command(editor: str) -> list[str]:
    """Split an editor setting into argv and add known extra arguments.

    Args:
        editor: Editor setting such as "vim" or "code --wait".

    Returns:
        List of command parts to run the editor.
    """
    parts = shlex.split(editor)
    if not parts:
        parts = [FALLBACK_EDITOR]

    extra = EDITOR_EXTRA_ARGS.get(Path(parts[0]).name, [])
    if extra and extra[0] not in parts:
        parts = parts + extra
    return parts


def find_editor(override: Optional[str] = None) -> list[str]:
    """Find the text editor to launch.

    Preference order:
    1. $PRNOTE_EDITOR, then the configured override
    2. The editor git reports (git var GIT_EDITOR)
    3. git config core.editor
    4. $VISUAL, then $EDITOR
    5. vi as fallback

    Args:
        override: Editor from the user configuration, if any.

    Returns:
        List of command parts to run the editor.
    """
    candidates = (
        os.environ.get("PRNOTE_EDITOR"),
        override,
        get_git_editor(),
        get_config_value("core.editor"),
        os.environ.get("VISUAL"),
        os.environ.get("EDITOR"),
    )
    for candidate in candidates:
        if candidate and candidate.strip():
            return editor_command(candidate)
    return editor_command(FALLBACK_EDITOR)


def open_editor(file_path: Path, editor_cmd: list[str]) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.
        editor_cmd: Editor command from find_editor.

    Raises:
        EditorError: If the editor binary does not exist or exits non-zero.
    """
    typer.echo(f"Opening editor: {' '.join(editor_cmd)}", err=True)

    try:
        # Run the editor and wait for it to complete
        result = subprocess.run(
            editor_cmd + [str(file_path)],
            check=False,
        )
    except FileNotFoundError:
        raise EditorError(f"Editor not found: {editor_cmd[0]}")

    if result.returncode != 0:
        raise EditorError(f"Editor exited with code {result.returncode}")
