"""Command-line interface for svgfontmetrics.

This module provides the CLI using Typer with rich output.

Commands:
- bounds: Bounding box of a path string
- info: Font-wide metrics of an SVG font
- measure: Width and height of a text set in an SVG font
"""

from svgfontmetrics.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
