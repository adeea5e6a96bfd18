"""Opening URLs and copying to the clipboard with OS commands.

Only macOS and Linux are supported; anything else raises
UnsupportedPlatformError.
"""

import subprocess
import sys
from typing import Optional

from prnote.exceptions import PrnoteError, UnsupportedPlatformError

OPEN_COMMANDS = {
    "darwin": ["open"],
    "linux": ["xdg-open"],
}

COPY_COMMANDS = {
    "darwin": ["pbcopy"],
    "linux": ["xclip", "-selection", "clipboard"],
}


def _platform_key(platform: Optional[str] = None) -> str:
    platform = platform or sys.platform
    # sys.platform is "linux" on Python 3, "linux2" on very old builds
    if platform.startswith("linux"):
        return "linux"
    return platform


def _command_for(commands: dict[str, list[str]], action: str, platform: Optional[str]) -> list[str]:
    key = _platform_key(platform)
    if key not in commands:
        raise UnsupportedPlatformError(f"Don't know how to {action} on platform '{platform or sys.platform}'.")
    return list(commands[key])


def _run(cmd: list[str], input_text: Optional[str] = None) -> None:
    try:
        result = subprocess.run(
            cmd,
            input=input_text,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise PrnoteError(f"Command not found: {cmd[0]}")
    if result.returncode != 0:
        raise PrnoteError(f"{cmd[0]} failed: {result.stderr.strip()}")


def open_url(url: str, platform: Optional[str] = None) -> None:
    """Open a URL in the default browser.

    Raises:
        UnsupportedPlatformError: If the OS is neither macOS nor Linux.
    """
    _run(_command_for(OPEN_COMMANDS, "open a URL", platform) + [url])


def copy_to_clipboard(text: str, platform: Optional[str] = None) -> None:
    """Copy text to the system clipboard.

    Raises:
        UnsupportedPlatformError: If the OS is neither macOS nor Linux.
    """
    _run(_command_for(COPY_COMMANDS, "copy to the clipboard", platform), input_text=text)
