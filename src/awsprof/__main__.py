"""Entry point for ``python -m awsprof``."""

from .cli.main import app

app(prog_name="awsprof")
