"""svgfontmetrics - Measure glyphs and text from SVG fonts.

svgfontmetrics interprets the path data of SVG font glyphs to compute
bounding boxes, and combines them into layout metrics such as text width,
text height and font height, without a rendering stack.

Example:
    >>> from svgfontmetrics import path_bounds
    >>> path_bounds("M 10 20 L 75 100").to_tuple()
    (10.0, 20.0, 75.0, 100.0)
"""

__version__ = "0.1.0"

from svgfontmetrics.core import FontMetrics, Path, path_bounds  # noqa: E402
from svgfontmetrics.domain import Bounds, Command, Font, Glyph  # noqa: E402
from svgfontmetrics.io import SvgFontReader, parse_svg_font  # noqa: E402

__all__ = [
    "Bounds",
    "Command",
    "Font",
    "FontMetrics",
    "Glyph",
    "Path",
    "SvgFontReader",
    "__version__",
    "parse_svg_font",
    "path_bounds",
]
