"""Shared fixtures for svgfontmetrics tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from svgfontmetrics.domain import Font, Glyph

SAMPLE_SVG_FONT = """<?xml version="1.0" standalone="no"?>
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
  <defs>
    <font id="sample" horiz-adv-x="500">
      <font-face font-family="Sample" units-per-em="1000" ascent="800" descent="-200" />
      <missing-glyph horiz-adv-x="500" d="M 0 0 L 500 0 L 500 -700 Z" />
      <!-- plain outlines -->
      <glyph glyph-name="A" unicode="A" horiz-adv-x="600" d="M 50 -700 L 550 0 L 50 0 Z" />
      <glyph glyph-name="b" unicode="b" d="M 40 -750 L 460 200 Z" />
      <glyph glyph-name="space" unicode=" " horiz-adv-x="250" />
      <glyph glyph-name="x" unicode="x" horiz-adv-x="400" d="M 0 0 W 10 10" />
    </font>
  </defs>
</svg>
"""


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_svgfontmetrics_handler", False):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def sample_font() -> Font:
    """Font matching SAMPLE_SVG_FONT, built without the reader."""
    return Font(
        advance_width=500.0,
        units_per_em=1000.0,
        ascent=800.0,
        descent=-200.0,
        glyphs=(
            Glyph(ord("A"), 600.0, "M 50 -700 L 550 0 L 50 0 Z", "A"),
            Glyph(ord("b"), 500.0, "M 40 -750 L 460 200 Z", "b"),
            Glyph(ord(" "), 250.0, "", "space"),
            Glyph(ord("x"), 400.0, "M 0 0 W 10 10", "x"),
        ),
        family="Sample",
    )


@pytest.fixture
def sample_font_file(tmp_path: Path) -> Path:
    """SAMPLE_SVG_FONT written to a temporary file."""
    path = tmp_path / "sample.svg"
    path.write_text(SAMPLE_SVG_FONT, encoding="utf-8")
    return path
