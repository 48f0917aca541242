"""Font and glyph representation.

These are plain values filled in by the SVG-font reader. Metrics are
computed from them by core.metrics; nothing here parses path data.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Glyph:
    """A single glyph of an SVG font.

    Attributes:
        unicode: Unicode scalar value of the character
        advance_width: Horizontal advance in font units
        path: Raw path data ("" for glyphs without an outline)
        name: Glyph name, if the font provides one
    """

    unicode: int
    advance_width: float
    path: str = ""
    name: str | None = None

    @property
    def character(self) -> str:
        """The glyph's character as a one-character string."""
        return chr(self.unicode)

    def is_empty(self) -> bool:
        """Check if glyph has no outline.

        Returns:
            True if the path data is blank, False otherwise
        """
        return not self.path.strip()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "unicode": self.unicode,
            "advance_width": self.advance_width,
            "path": self.path,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance
        """
        return cls(
            unicode=data["unicode"],
            advance_width=data["advance_width"],
            path=data.get("path", ""),
            name=data.get("name"),
        )


@dataclass(frozen=True)
class Font:
    """Font-wide values and the ordered glyph collection.

    Attributes:
        advance_width: Default horizontal advance for glyphs without their own
        units_per_em: Size of the em square in font units
        ascent: Distance from baseline to the top of the em box
        descent: Distance from baseline to the bottom (usually negative)
        glyphs: Glyphs in document order
        family: Font family name from font-face, if present
    """

    advance_width: float
    units_per_em: float
    ascent: float
    descent: float
    glyphs: tuple[Glyph, ...] = field(default_factory=tuple)
    family: str | None = None

    def __len__(self) -> int:
        return len(self.glyphs)

    def __iter__(self) -> Iterator[Glyph]:
        return iter(self.glyphs)

    def find_glyph(self, character: str) -> Glyph | None:
        """Find the first glyph for a character.

        Glyph sets are small, so this is a linear scan.

        Args:
            character: One-character string to look up

        Returns:
            The first matching glyph, or None
        """
        code = ord(character)
        for glyph in self.glyphs:
            if glyph.unicode == code:
                return glyph
        return None

    def characters(self) -> str:
        """Return the characters covered by the font, in glyph order."""
        return "".join(glyph.character for glyph in self.glyphs)
