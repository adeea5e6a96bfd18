"""Main CLI command: compose a pull request in an editor and submit it."""

from typing import Optional

import typer

from prnote import __version__
from prnote.exceptions import (
    EmptyTitleError,
    NotGitHubRepoError,
    PrnoteError,
    ProtectedBranchError,
    PushFailedError,
    SubmissionFailedError,
)
from prnote.git import (
    GitError,
    get_branch,
    get_commit_range,
    get_default_branch,
    get_remote_url,
    push_branch,
)
from prnote.github import create_pull_request, is_github_remote
from prnote.message import (
    BufferStore,
    load_pr_template,
    parse_message,
    prepare_buffer,
    resolve_comment_char,
)
from prnote.platform import copy_to_clipboard, open_url
from prnote.settings import Settings, load_settings
from prnote.cli.utils import find_editor, open_editor

REMOTE = "origin"

# gh pr create options whose values pick the refs shown in the buffer
_BASE_OPTIONS = ("--base", "-B")
_HEAD_OPTIONS = ("--head", "-H")


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"prnote {__version__}")
        raise typer.Exit()


def _option_value(args: list[str], names: tuple[str, ...]) -> Optional[str]:
    """Find the value of an option in pass-through arguments.

    Handles "--name value", "--name=value", "-N value" and "-Nvalue".
    """
    for index, arg in enumerate(args):
        for name in names:
            if arg == name:
                if index + 1 < len(args):
                    return args[index + 1]
                return None
            if name.startswith("--") and arg.startswith(name + "="):
                return arg[len(name) + 1:]
            if not name.startswith("--") and arg.startswith(name) and len(arg) > len(name):
                return arg[len(name):]
    return None


def resolve_refs(gh_args: list[str], branch: str) -> tuple[str, str]:
    """Work out the base and head refs described in the buffer.

    Args:
        gh_args: Arguments forwarded to gh pr create.
        branch: The current branch.

    Returns:
        (base, head): --base/-B or the remote's default branch, and
        --head/-H or the current branch.
    """
    base = _option_value(gh_args, _BASE_OPTIONS) or get_default_branch(REMOTE)
    head = _option_value(gh_args, _HEAD_OPTIONS) or branch
    return base, head


def check_branch(settings: Settings) -> str:
    """Make sure the repository and branch can open a pull request.

    Returns:
        The current branch name.

    Raises:
        NotGitHubRepoError: If origin is not a GitHub remote.
        ProtectedBranchError: If the current branch is protected.
    """
    remote_url = get_remote_url(REMOTE)
    if not is_github_remote(remote_url):
        raise NotGitHubRepoError(
            f"Remote '{REMOTE}' is not a GitHub repository: {remote_url or '(not configured)'}"
        )

    branch = get_branch()
    if branch in settings.protected_branches:
        raise ProtectedBranchError(
            f"Refusing to open a pull request from '{branch}'. Create a topic branch first."
        )
    return branch


def push_current_branch(branch: str) -> None:
    """Push the branch to origin with upstream tracking.

    Raises:
        PushFailedError: If git push fails.
    """
    typer.echo(f"Pushing {branch} to {REMOTE}...", err=True)
    try:
        push_branch(branch, REMOTE)
    except GitError as e:
        raise PushFailedError(f"Failed to push '{branch}' to {REMOTE}.\n{e}")


def compose_and_submit(settings: Settings, base: str, head: str, gh_args: list[str]) -> str:
    """Prepare the buffer, let the user edit it and submit the result.

    The buffer is kept on disk when the title is empty or gh fails, so the
    next run starts from the same message.

    Returns:
        The URL of the new pull request ('' if gh printed none).

    Raises:
        EmptyTitleError: If the edited message has no title.
        SubmissionFailedError: If gh pr create fails.
    """
    comment_char = resolve_comment_char()
    # The pull request merges into the remote branch, so list history against it
    commits = get_commit_range(f"{REMOTE}/{base}", head)

    with BufferStore(settings.buffer_file) as store:
        if store.exists:
            typer.echo(f"Recovering message from a previous attempt ({store.path})", err=True)

        prepare_buffer(
            store,
            base,
            head,
            comment_char=comment_char,
            pr_template=load_pr_template(settings.repo_root),
            commits=commits,
        )
        open_editor(store.path, find_editor(settings.user_config.editor))

        message = parse_message(store.read(), comment_char)
        if not message.has_title:
            store.keep()
            raise EmptyTitleError(
                f"Aborting due to empty pull request title. Your message is saved in {store.path}"
            )

        try:
            return create_pull_request(message.title, message.body, gh_args)
        except SubmissionFailedError as e:
            store.keep()
            raise SubmissionFailedError(
                f"{e}\nYour message is saved in {store.path} and will be reused next time."
            )


def main_command(
    ctx: typer.Context,
    push: bool = typer.Option(
        False,
        "--push",
        "-P",
        help="Push the current branch to origin (with upstream tracking) before submitting",
    ),
    copy: bool = typer.Option(
        False,
        "--copy",
        "-C",
        help="Copy the pull request URL to the clipboard",
    ),
    open_browser: bool = typer.Option(
        False,
        "--open",
        "-O",
        help="Open the pull request URL in a browser",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Compose a GitHub pull request in your editor and create it with gh.

    Any other arguments are passed to 'gh pr create' unchanged.
    """
    prog_name = ctx.find_root().info_name or "prnote"
    gh_args = list(ctx.args)

    try:
        settings = load_settings(prog_name)
        branch = check_branch(settings)

        if push or settings.user_config.push:
            push_current_branch(branch)

        base, head = resolve_refs(gh_args, branch)
        url = compose_and_submit(settings, base, head, gh_args)

        if url:
            typer.echo(url)
        if (open_browser or settings.user_config.open_browser) and url:
            open_url(url)
        if (copy or settings.user_config.copy_url) and url:
            copy_to_clipboard(url)

    except (PrnoteError, GitError) as e:
        typer.echo(f"{prog_name}: {e}", err=True)
        raise typer.Exit(1)
