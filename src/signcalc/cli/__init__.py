"""Command-line interface for signcalc.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Perimeter of a single text run
- Full sign quotes with a second line and a logo circle
- JSON output for scripting
- Verbose/quiet output modes
"""

from signcalc.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
