"""Allow running prnote as ``python -m prnote``."""

from prnote.cli import app

app(prog_name="prnote")
