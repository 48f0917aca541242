"""SVG font reader.

This module provides parse_svg_font for in-memory documents and the
SvgFontReader class for font files. Both extract the font-wide values
and the glyph list into domain models.
"""

from collections.abc import Iterator
from html import unescape
from pathlib import Path

from lxml import etree

from svgfontmetrics.domain.font import Font, Glyph
from svgfontmetrics.exceptions import FontFormatError, FontLoadError
from svgfontmetrics.utils.logging import MetricsLogger


def _local_name(element: etree._Element) -> str | None:
    """Tag name without namespace, or None for comments and PIs."""
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def _find(root: etree._Element, name: str) -> etree._Element | None:
    for element in root.iter():
        if _local_name(element) == name:
            return element
    return None


def _number(element: etree._Element, attribute: str, source: str) -> float:
    """Read a required numeric attribute."""
    value = element.get(attribute)
    if value is None:
        raise FontFormatError(
            source, f"<{_local_name(element)}> has no {attribute} attribute"
        )
    try:
        return float(value)
    except ValueError:
        raise FontFormatError(
            source, f"<{_local_name(element)}> {attribute}='{value}' is not a number"
        ) from None


def _read_glyph(
    element: etree._Element, default_advance: float, source: str
) -> Glyph:
    unicode = element.get("unicode")
    if unicode is None:
        raise FontFormatError(source, "<glyph> has no unicode attribute")

    # Double-escaped entities survive XML parsing (e.g. "&amp;eacute;")
    decoded = unescape(unicode)
    if not decoded:
        raise FontFormatError(source, "<glyph> has an empty unicode attribute")

    advance = (
        _number(element, "horiz-adv-x", source)
        if element.get("horiz-adv-x") is not None
        else default_advance
    )

    return Glyph(
        unicode=ord(decoded[0]),
        advance_width=advance,
        path=element.get("d", ""),
        name=element.get("glyph-name"),
    )


def parse_svg_font(
    data: str | bytes,
    allowed_characters: frozenset[str] | None = None,
    source: str = "<string>",
    logger: MetricsLogger | None = None,
) -> Font:
    """Parse an SVG document containing a <font> element.

    Args:
        data: SVG document
        allowed_characters: Keep only glyphs for these characters (None = all)
        source: Name used in error messages
        logger: Logger for the load summary

    Returns:
        Font domain model

    Raises:
        FontLoadError: If the document is not well-formed XML
        FontFormatError: If a required element or attribute is missing
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    try:
        root = etree.fromstring(data, parser=etree.XMLParser(resolve_entities=False))
    except etree.XMLSyntaxError as e:
        raise FontLoadError(source, str(e)) from e

    font_element = _find(root, "font")
    if font_element is None:
        raise FontFormatError(source, "no <font> element found")

    font_face = _find(font_element, "font-face")
    if font_face is None:
        raise FontFormatError(source, "no <font-face> element found")

    advance = _number(font_element, "horiz-adv-x", source)
    units_per_em = _number(font_face, "units-per-em", source)
    if not units_per_em > 0:
        raise FontFormatError(
            source, f"<font-face> units-per-em='{units_per_em:g}' must be positive"
        )
    ascent = _number(font_face, "ascent", source)
    descent = _number(font_face, "descent", source)

    glyphs: list[Glyph] = []
    dropped = 0
    for element in font_element.iter():
        if _local_name(element) != "glyph":
            continue
        glyph = _read_glyph(element, advance, source)
        if allowed_characters is not None and glyph.character not in allowed_characters:
            dropped += 1
            continue
        glyphs.append(glyph)

    if logger is None:
        logger = MetricsLogger()
    logger.log_font_loaded(source, len(glyphs), units_per_em, dropped)

    return Font(
        advance_width=advance,
        units_per_em=units_per_em,
        ascent=ascent,
        descent=descent,
        glyphs=tuple(glyphs),
        family=font_face.get("font-family"),
    )


class SvgFontReader:
    """Loads SVG font files into domain models.

    Example:
        with SvgFontReader(Path("font.svg")) as reader:
            for glyph in reader.iter_glyphs():
                print(glyph.character, glyph.advance_width)
    """

    def __init__(
        self,
        font_path: Path,
        allowed_characters: frozenset[str] | None = None,
        logger: MetricsLogger | None = None,
    ) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the SVG font file
            allowed_characters: Keep only glyphs for these characters (None = all)
            logger: Logger for the load summary
        """
        self._font_path = font_path
        self._allowed_characters = allowed_characters
        self._logger = logger
        self._font: Font | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If font file cannot be read or is not XML
            FontFormatError: If a required element or attribute is missing
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            data = self._font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        self._font = parse_svg_font(
            data,
            allowed_characters=self._allowed_characters,
            source=str(self._font_path),
            logger=self._logger,
        )

    @property
    def font(self) -> Font:
        """Return the loaded font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def glyph_count(self) -> int:
        """Return the number of glyphs kept from the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return len(self.font)

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Iterate over glyphs in document order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        yield from self.font.glyphs

    def close(self) -> None:
        """Drop the loaded font."""
        self._font = None

    def __enter__(self) -> "SvgFontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
