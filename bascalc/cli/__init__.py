"""bascalc command-line adapter."""

from bascalc.cli.main import app, main

__all__ = ["app", "main"]
