"""Font I/O layer for svgfontmetrics.

This module reads SVG fonts with lxml and converts them to domain models.

Key responsibilities:
- Locate <font>, <font-face> and <glyph> elements
- Read font-wide and per-glyph numeric attributes
- Decode HTML entities in unicode attributes
- Filter glyphs by an allowed character set

Key classes:
- SvgFontReader: Load SVG font files
"""

from svgfontmetrics.io.reader import SvgFontReader, parse_svg_font

__all__ = [
    "SvgFontReader",
    "parse_svg_font",
]
