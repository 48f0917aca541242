"""Domain models for svgfontmetrics.

This module contains the value types shared by the interpreter, the
metrics layer and the font reader. All models are immutable (frozen
dataclasses); operations that change a value return a new one.

Key classes:
- Bounds: Bounding box accumulator with pen position
- Command: One parsed path command with its arguments
- Glyph: A single glyph with its advance and outline
- Font: Font-wide metrics and the glyph collection
"""

from svgfontmetrics.domain.bounds import Bounds
from svgfontmetrics.domain.command import ARITY, BOUND_POINT, VALID_COMMANDS, Command
from svgfontmetrics.domain.font import Font, Glyph

__all__: list[str] = [
    # Tables
    "ARITY",
    "BOUND_POINT",
    "VALID_COMMANDS",
    # Core types
    "Bounds",
    "Command",
    "Font",
    "Glyph",
]
