# CLI module for stylescan
"""stylescan CLI - Command-line interface for the stylescan tool."""

from stylescan.cli.main import app

__all__ = ["app"]
