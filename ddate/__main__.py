"""Allow running ddate as ``python -m ddate``."""

from ddate.cli import app

app(prog_name="ddate")
