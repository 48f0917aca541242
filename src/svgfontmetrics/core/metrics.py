"""Glyph metrics computed from SVG font outlines.

FontMetrics measures each glyph by interpreting its path data once and
combines the resulting bounds into font-wide and per-text values.

A glyph whose outline is empty or cannot be interpreted contributes
nothing; the error is logged and the computation continues.
"""

from svgfontmetrics.config import RepeatMode
from svgfontmetrics.core.path import path_bounds
from svgfontmetrics.domain.bounds import Bounds
from svgfontmetrics.domain.font import Font, Glyph
from svgfontmetrics.exceptions import PathError
from svgfontmetrics.utils.logging import MeasurementStats, MetricsLogger


class FontMetrics:
    """Layout metrics for an SVG font.

    All operations are reads over the font. Bounds are memoised per glyph
    on the FontMetrics instance; the font itself is never modified.

    Example:
        metrics = FontMetrics(font)
        width = metrics.text_width("Hello")
        height = metrics.text_height("Hello")
    """

    def __init__(
        self,
        font: Font,
        repeat_mode: RepeatMode = RepeatMode.FIRST,
        logger: MetricsLogger | None = None,
    ) -> None:
        """Initialize the metrics calculator.

        Args:
            font: Font to measure
            repeat_mode: How repeated path argument tuples are replayed
            logger: Logger for per-glyph events (default: package logger)
        """
        self._font = font
        self._repeat_mode = repeat_mode
        self._logger = logger if logger is not None else MetricsLogger()
        self._cache: dict[Glyph, Bounds | None] = {}

    @property
    def font(self) -> Font:
        """The font being measured."""
        return self._font

    @property
    def stats(self) -> MeasurementStats:
        """Counts of measured, skipped and rejected glyphs."""
        return self._logger.stats

    def glyph_bounds(self, glyph: Glyph) -> Bounds | None:
        """Compute the bounds of one glyph's outline.

        Args:
            glyph: Glyph to measure

        Returns:
            Bounds of the outline, or None if it is empty or malformed
        """
        if glyph in self._cache:
            return self._cache[glyph]

        bounds: Bounds | None
        if glyph.is_empty():
            self._logger.log_glyph_skipped(glyph.character, "empty outline")
            bounds = None
        else:
            try:
                bounds = path_bounds(glyph.path, self._repeat_mode)
            except PathError as e:
                self._logger.log_glyph_error(glyph.character, e)
                bounds = None
            else:
                self._logger.log_glyph_measured(glyph.character, bounds.to_tuple())

        self._cache[glyph] = bounds
        return bounds

    def _vertical_span(self, glyphs: list[Glyph]) -> float:
        min_y = 0.0
        max_y = 0.0
        for glyph in glyphs:
            bounds = self.glyph_bounds(glyph)
            if bounds is None:
                continue
            min_y = min(min_y, bounds.y1)
            max_y = max(max_y, bounds.y2)
        return max_y - min_y

    def font_height(self) -> float:
        """Height spanned by all glyph outlines of the font.

        The span is seeded at the baseline (0), so it always includes it.

        Returns:
            Maximum y minus minimum y over all glyphs (0 for an empty font)
        """
        return self._vertical_span(list(self._font.glyphs))

    def text_height(self, text: str) -> float:
        """Height spanned by the glyphs used in a text.

        Args:
            text: Text to measure

        Returns:
            Maximum y minus minimum y over the glyphs of `text`
        """
        characters = set(text)
        return self._vertical_span(
            [glyph for glyph in self._font.glyphs if glyph.character in characters]
        )

    def left_margin(self, text: str) -> float:
        """Distance from the advance origin to the ink of the first glyph.

        Args:
            text: Text to measure

        Returns:
            x1 of the first character of `text` that has a glyph, or 0
        """
        for character in text:
            glyph = self._font.find_glyph(character)
            if glyph is None:
                continue
            bounds = self.glyph_bounds(glyph)
            return bounds.x1 if bounds is not None else 0.0
        return 0.0

    def text_width(self, text: str) -> float:
        """Width of a text set on one line.

        Sums the advance widths of the characters that have glyphs and
        trims the left margin of the first one.

        Args:
            text: Text to measure

        Returns:
            Total advance minus the left margin
        """
        total = 0.0
        for character in text:
            glyph = self._font.find_glyph(character)
            if glyph is None:
                self._logger.log_glyph_skipped(character, "no glyph in font")
                continue
            total += glyph.advance_width
        return total - self.left_margin(text)

    def highest_glyph(self) -> str | None:
        """Find the character whose outline reaches highest.

        Highest means the smallest y1. Ties go to the glyph that comes
        first in the font.

        Returns:
            The character, or None if no glyph has a usable outline
        """
        best: Glyph | None = None
        best_y = 0.0
        for glyph in self._font.glyphs:
            bounds = self.glyph_bounds(glyph)
            if bounds is None:
                continue
            if best is None or bounds.y1 < best_y:
                best = glyph
                best_y = bounds.y1
        return best.character if best is not None else None

    def line_height(self) -> float:
        """Distance between ascent and descent lines."""
        return self._font.ascent - self._font.descent

    def scale(self, value: float, font_size: float) -> float:
        """Convert a value in font units to a rendered size.

        Args:
            value: Value in font units
            font_size: Size of the em square in output units

        Returns:
            Scaled value
        """
        return value * font_size / self._font.units_per_em
