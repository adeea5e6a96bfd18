"""CLI entry point for prnote.

prnote is a single command; options it does not know are forwarded to
'gh pr create'.
"""

import typer

from prnote.cli.main import main_command

CONTEXT_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": ["-h", "--help"],
}

# Main application
app = typer.Typer(
    name="prnote",
    help="prnote: compose GitHub pull requests in your editor",
    add_completion=False,
)

app.command(context_settings=CONTEXT_SETTINGS)(main_command)


__all__ = [
    "app",
    "main_command",
]
