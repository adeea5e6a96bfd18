"""GitHub CLI wrapper.

Contains:
- is_github_remote: Check whether a remote URL points at GitHub
- extract_url: Pull the pull request URL out of gh's output
- create_pull_request: Run ``gh pr create``
"""

import re
import subprocess

from prnote.exceptions import SubmissionFailedError

GITHUB_HOST = "github.com"

_URL_PATTERN = re.compile(r"https://\S+")


def is_github_remote(remote_url: str) -> bool:
    """Return True if the remote URL references github.com.

    Accepts HTTPS (https://github.com/owner/repo.git) and SSH
    (git@github.com:owner/repo.git, ssh://git@github.com/...) forms.
    """
    return GITHUB_HOST in remote_url.lower()


def extract_url(output: str) -> str:
    """Return the last https URL in the output, or '' if there is none."""
    matches = _URL_PATTERN.findall(output)
    if not matches:
        return ""
    return matches[-1]


def create_pull_request(title: str, body: str, extra_args: list[str]) -> str:
    """Create a pull request with the GitHub CLI.

    Args:
        title: Pull request title.
        body: Pull request description.
        extra_args: Arguments forwarded verbatim to ``gh pr create``.

    Returns:
        The URL of the created pull request ('' if gh printed none).

    Raises:
        SubmissionFailedError: If gh is missing or exits with an error.
    """
    cmd = ["gh", "pr", "create", "--title", title, "--body", body] + list(extra_args)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise SubmissionFailedError("GitHub CLI (gh) is not installed or not in PATH.")

    if result.returncode != 0:
        error = (result.stderr or result.stdout or "").strip()
        raise SubmissionFailedError(error or f"gh pr create exited with code {result.returncode}")

    return extract_url(result.stdout)
