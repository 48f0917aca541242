"""Core processing for svgfontmetrics.

This module contains:

- Tokenizing SVG path data into commands
- Replaying commands into a bounding box
- Combining glyph bounds into font and text metrics

Key functions:
- tokenize: Split path data into Commands
- parse_arguments: Parse the numeric arguments of one command
- path_bounds: Parse path data and compute its bounds

Key classes:
- Path: Parsed path data with bounds replay
- FontMetrics: Font-wide and per-text metrics
"""

from svgfontmetrics.core.metrics import FontMetrics
from svgfontmetrics.core.path import Path, path_bounds
from svgfontmetrics.core.tokenizer import parse_arguments, tokenize

__all__ = [
    "FontMetrics",
    "Path",
    "parse_arguments",
    "path_bounds",
    "tokenize",
]
