"""Command-line interface for offsetcurve.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- WKT input from an argument or a file
- Join style, mitre limit and strategy options
- Quiet mode printing only the resulting WKT
- Detailed error reporting
"""

from offsetcurve.cli.app import cli, main

__all__ = ["cli", "main"]
