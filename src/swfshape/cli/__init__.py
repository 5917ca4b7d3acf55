"""Command-line interface for swfshape.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Parallel batch decoding with a progress bar
- Summary mode listing the decoded paths of each shape
- Verbose/quiet output modes
"""

from swfshape.cli.app import cli, main

__all__ = ["cli", "main"]
