"""Command line interface for getdown-tool"""

from .main import cli, main

__all__ = ["cli", "main"]
