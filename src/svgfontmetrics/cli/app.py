"""CLI application entry point for svgfontmetrics.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from svgfontmetrics import __version__
from svgfontmetrics.cli.output import (
    SYM_OK,
    console,
    print_bounds,
    print_error,
    print_font_info,
    print_header,
    print_json,
    print_metrics,
    print_skipped,
    print_step,
)
from svgfontmetrics.config import (
    CharacterSetConfig,
    LoggingConfig,
    ParsingConfig,
    RepeatMode,
    SvgFontMetricsSettings,
)
from svgfontmetrics.core import FontMetrics, path_bounds
from svgfontmetrics.domain import Font
from svgfontmetrics.exceptions import (
    FontFormatError,
    FontLoadError,
    PathError,
    SvgFontMetricsError,
)
from svgfontmetrics.io import SvgFontReader
from svgfontmetrics.utils import MetricsLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="svgfontmetrics",
    help="Measure glyph bounds and text metrics from SVG fonts.",
    add_completion=False,
    no_args_is_help=True,
)

ExpandOption = Annotated[
    bool,
    typer.Option(
        "--expand-repeats",
        help="Replay every repeated argument tuple instead of only the first",
    ),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print results as JSON"),
]
CharsetOption = Annotated[
    str | None,
    typer.Option(
        "--charset",
        "-c",
        help="Only read glyphs for these characters",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="List glyphs with invalid paths"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]svgfontmetrics[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Measure glyph bounds and text metrics from SVG fonts."""


def _build_settings(
    expand_repeats: bool,
    charset: str | None,
    log_file: Path | None,
    log_level: str,
) -> SvgFontMetricsSettings:
    settings = SvgFontMetricsSettings(
        parsing=ParsingConfig(
            repeat_mode=RepeatMode.EXPAND if expand_repeats else RepeatMode.FIRST,
        ),
        charset=CharacterSetConfig(allowed_characters=charset),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    return settings


def _load_font(
    font_path: Path, settings: SvgFontMetricsSettings, logger: MetricsLogger
) -> Font:
    if not font_path.is_file():
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    with SvgFontReader(
        font_path,
        allowed_characters=settings.charset.as_set(),
        logger=logger,
    ) as reader:
        return reader.font


def _run(action: Callable[[], None]) -> None:
    """Run a command body, turning package errors into exit code 1."""
    try:
        action()
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontFormatError as e:
        print_error(f"Invalid SVG font: {e.details}")
        raise typer.Exit(code=1)
    except PathError as e:
        print_error(f"Invalid path data: {e}")
        raise typer.Exit(code=1)
    except SvgFontMetricsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def bounds(
    path_data: Annotated[
        str,
        typer.Argument(help="SVG path data (the d attribute)", show_default=False),
    ],
    expand_repeats: ExpandOption = False,
    as_json: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Print the bounding box of SVG path data.

    Example:
        svgfontmetrics bounds "M 10 20 L 75 100"
    """
    settings = _build_settings(expand_repeats, None, log_file, log_level)

    def action() -> None:
        result = path_bounds(path_data, settings.parsing.repeat_mode)
        if as_json:
            print_json(result.to_dict())
        else:
            print_bounds(result)

    _run(action)


@app.command()
def info(
    font_path: Annotated[
        Path,
        typer.Argument(help="Path to an SVG font file", show_default=False),
    ],
    expand_repeats: ExpandOption = False,
    charset: CharsetOption = None,
    as_json: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
) -> None:
    """Print font-wide metrics of an SVG font."""
    settings = _build_settings(expand_repeats, charset, log_file, log_level)
    logger = MetricsLogger()

    def action() -> None:
        if not as_json:
            print_header(__version__)
            print_step("Loading font")
        font = _load_font(font_path, settings, logger)
        metrics = FontMetrics(font, settings.parsing.repeat_mode, logger=logger)

        rows = {
            "units per em": font.units_per_em,
            "ascent": font.ascent,
            "descent": font.descent,
            "line height": metrics.line_height(),
            "font height": metrics.font_height(),
            "highest glyph": metrics.highest_glyph(),
        }

        if as_json:
            print_json(
                {
                    "family": font.family,
                    "glyphs": len(font),
                    **{name.replace(" ", "_"): value for name, value in rows.items()},
                }
            )
            return

        print_font_info(str(font_path), font.family, len(font), font.units_per_em)
        print_step("Metrics")
        print_metrics("Font", rows)
        print_skipped(metrics.stats.skipped_count, metrics.stats.errors, verbose)
        console.print(f"\n[bold green]{SYM_OK} Done[/bold green]")

    _run(action)


@app.command()
def measure(
    font_path: Annotated[
        Path,
        typer.Argument(help="Path to an SVG font file", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to measure", show_default=False),
    ],
    size: Annotated[
        float | None,
        typer.Option(
            "--size",
            "-s",
            help="Also report values scaled to this font size",
            min=0.0,
        ),
    ] = None,
    expand_repeats: ExpandOption = False,
    charset: CharsetOption = None,
    as_json: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
) -> None:
    """Print the width, height and left margin of a text."""
    settings = _build_settings(expand_repeats, charset, log_file, log_level)
    logger = MetricsLogger()

    def action() -> None:
        font = _load_font(font_path, settings, logger)
        metrics = FontMetrics(font, settings.parsing.repeat_mode, logger=logger)

        rows: dict[str, float] = {
            "width": metrics.text_width(text),
            "height": metrics.text_height(text),
            "left margin": metrics.left_margin(text),
        }
        if size is not None:
            for name, value in list(rows.items()):
                rows[f"{name} @ {size:g}"] = metrics.scale(value, size)

        if as_json:
            print_json(
                {
                    "text": text,
                    **{
                        name.replace(" @ ", "_at_").replace(" ", "_"): value
                        for name, value in rows.items()
                    },
                }
            )
            return

        print_metrics(f"Metrics for {text!r}", rows)
        print_skipped(metrics.stats.skipped_count, metrics.stats.errors, verbose)

    _run(action)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
