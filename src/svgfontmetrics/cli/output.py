"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from svgfontmetrics.domain.bounds import Bounds

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svgfontmetrics[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(
    font_path: str, family: str | None, glyph_count: int, upm: float
) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        family: Font family name, if known
        glyph_count: Number of glyphs read
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    if family:
        line1.append(f" ({family})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {_format_number(upm)} UPM")


def print_metrics(title: str, rows: dict[str, Any]) -> None:
    """Print a two-column table of metric names and values.

    Args:
        title: Table title
        rows: Metric name to value
    """
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    for name, value in rows.items():
        if value is None:
            shown = "-"
        elif isinstance(value, float | int):
            shown = _format_number(value)
        else:
            shown = str(value)
        table.add_row(name, shown)
    console.print(table)


def print_bounds(bounds: Bounds) -> None:
    """Print a bounding box."""
    print_metrics(
        "Bounds",
        {
            "x1": bounds.x1,
            "y1": bounds.y1,
            "x2": bounds.x2,
            "y2": bounds.y2,
            "width": bounds.width,
            "height": bounds.height,
            "last point": f"({_format_number(bounds.last_point[0])}, "
            f"{_format_number(bounds.last_point[1])})",
        },
    )


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON without rich markup."""
    console.print_json(json.dumps(data))


def print_skipped(skipped: int, errors: list[tuple[str, str]], verbose: bool) -> None:
    """Print a summary of glyphs that contributed nothing.

    Args:
        skipped: Number of glyphs without an outline
        errors: (character, message) for each rejected glyph path
        verbose: Whether to list every rejected glyph
    """
    if not skipped and not errors:
        return
    error_style = "red" if errors else "green"
    console.print(
        f"\n  {skipped} glyphs skipped {SYM_DOT} "
        f"[{error_style}]{len(errors)} invalid paths[/{error_style}]"
    )
    if verbose:
        for character, message in errors:
            console.print(f"  {character!r}: {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
