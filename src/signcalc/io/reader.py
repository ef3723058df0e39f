"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class, the outline provider of the
measurement pipeline. It loads a font resource, reports vertical metrics and
produces the outline path of a shaped text run at a given font size.
"""

import re
from io import BytesIO
from pathlib import Path
from typing import Any

import structlog
import uharfbuzz as hb
from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont

from signcalc.config import ARABIC_ALEF
from signcalc.domain import OutlinePath
from signcalc.exceptions import FontLoadError
from signcalc.io.converter import PathPen, draw_glyph, glyph_transform
from signcalc.io.source import fetch_font_bytes

logger = structlog.get_logger("signcalc.io")

DEFAULT_UNITS_PER_EM = 1000
REQUIRED_TABLES = ("head", "hhea", "hmtx", "maxp", "cmap")

_LATIN_LETTER = re.compile(r"[A-Za-z]")


def reference_char(text: str, latin: str = "H", fallback: str = ARABIC_ALEF) -> str:
    """Choose the character whose glyph defines letter height.

    Text containing any ASCII Latin letter is calibrated on the Latin
    reference (capital H). Any other text is calibrated on the fallback
    reference (Arabic alef).

    Args:
        text: Text being measured
        latin: Reference for Latin text
        fallback: Reference for everything else

    Returns:
        Reference character
    """
    return latin if _LATIN_LETTER.search(text) else fallback


class FontReader:
    """Loads a TTF/OTF font and renders shaped text to outline paths.

    The font is parsed twice from the same bytes: fonttools provides glyph
    outlines and bounds, HarfBuzz provides shaping (glyph selection, advances,
    kerning and mark offsets).

    Example:
        with FontReader("Montserrat-Black.ttf") as reader:
            height = reader.cap_height_units("HELLO")
            path = reader.outline_path("HELLO", font_size_px=120.0)
    """

    def __init__(
        self,
        resource: str | Path,
        timeout: float = 30.0,
        latin_reference: str = "H",
        fallback_reference: str = ARABIC_ALEF,
    ) -> None:
        """Initialize the font reader.

        Args:
            resource: Filesystem path or http(s) URL of the font
            timeout: Seconds to wait when fetching over HTTP
            latin_reference: Reference glyph for text with Latin letters
            fallback_reference: Reference glyph for any other text
        """
        self._resource = resource
        self._timeout = timeout
        self._latin_reference = latin_reference
        self._fallback_reference = fallback_reference
        self._font: TTFont | None = None
        self._hb_font: Any = None
        self._glyph_set: Any = None
        self._cmap: dict[int, str] = {}

    @classmethod
    def from_resource(
        cls,
        resource: str | Path,
        timeout: float = 30.0,
        latin_reference: str = "H",
        fallback_reference: str = ARABIC_ALEF,
    ) -> "FontReader":
        """Create a reader and load the font immediately.

        Raises:
            FontLoadError: If the font cannot be fetched or parsed
        """
        reader = cls(
            resource,
            timeout=timeout,
            latin_reference=latin_reference,
            fallback_reference=fallback_reference,
        )
        reader.load()
        return reader

    @property
    def resource(self) -> str:
        """Return the font resource as a string."""
        return str(self._resource)

    def load(self) -> None:
        """Fetch and parse the font.

        Tables needed for measuring are read eagerly so that a corrupt font
        fails here rather than halfway through a measurement.

        Raises:
            FontLoadError: If the font cannot be fetched or is not a valid font
        """
        data = fetch_font_bytes(self._resource, timeout=self._timeout)

        try:
            font = TTFont(BytesIO(data))
        except Exception as e:
            raise FontLoadError(self.resource, str(e)) from e

        missing = [tag for tag in REQUIRED_TABLES if tag not in font]
        if missing:
            raise FontLoadError(self.resource, f"missing tables: {', '.join(missing)}")

        try:
            font.ensureDecompiled()
            cmap = font.getBestCmap() or {}
            glyph_set = font.getGlyphSet()
            upm = font["head"].unitsPerEm or DEFAULT_UNITS_PER_EM  # type: ignore[attr-defined]

            hb_font = hb.Font(hb.Face(hb.Blob(data)))
            hb_font.scale = (upm, upm)
        except Exception as e:
            raise FontLoadError(self.resource, str(e)) from e

        self._font = font
        self._hb_font = hb_font
        self._glyph_set = glyph_set
        self._cmap = cmap

        logger.debug(
            "Font loaded",
            font=self.resource,
            format=self.format,
            glyphs=self.glyph_count,
            upm=self.units_per_em,
        )

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-flavoured fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        A missing or zero value falls back to 1000.

        Returns:
            Units per em value

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        return font["head"].unitsPerEm or DEFAULT_UNITS_PER_EM  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        return font["maxp"].numGlyphs  # type: ignore[attr-defined]

    def glyph_name_for(self, char: str) -> str:
        """Map a character to its glyph name.

        Characters the font does not cover map to the first glyph in the
        font (.notdef).

        Args:
            char: Single character

        Returns:
            Glyph name

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        name = self._cmap.get(ord(char))
        if name is None:
            return font.getGlyphOrder()[0]
        return name

    def glyph_bounds(self, char: str) -> tuple[float, float, float, float] | None:
        """Return the exact outline bounds of a character's glyph.

        Args:
            char: Single character

        Returns:
            (x_min, y_min, x_max, y_max) in font units, or None for a glyph
            without contours

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        glyph_name = self.glyph_name_for(char)
        pen = BoundsPen(self._glyph_set)
        self._glyph_set[glyph_name].draw(pen)
        return pen.bounds

    def reference_for(self, text: str) -> str:
        """Return the reference character used to calibrate a text run."""
        return reference_char(
            text, latin=self._latin_reference, fallback=self._fallback_reference
        )

    def glyph_height_units(self, char: str) -> float:
        """Return the vertical extent of a single character's glyph.

        Empty or missing glyphs are floored at 1 font unit so the height can
        always be divided by.

        Args:
            char: Single character

        Returns:
            max(1, y_max - y_min) in font units

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        bounds = self.glyph_bounds(char)
        if bounds is None:
            return 1.0
        _, y_min, _, y_max = bounds
        return max(1.0, y_max - y_min)

    def cap_height_units(self, text: str) -> float:
        """Return the letter height that calibrates a text run.

        The height is that of the reference glyph chosen for the text: the
        Latin reference when the text has any ASCII Latin letter, the
        fallback reference otherwise.

        Args:
            text: Text being measured

        Returns:
            Reference glyph height in font units, at least 1

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self.glyph_height_units(self.reference_for(text))

    def outline_path(self, text: str, font_size_px: float) -> OutlinePath:
        """Shape a text run and return its outline.

        The whole string is shaped at once so glyph selection and advances
        match normal text layout. Right-to-left runs come back from HarfBuzz
        in visual order, so the pen always advances to the right.

        Args:
            text: Text to render
            font_size_px: Nominal font size (em size) in output units

        Returns:
            OutlinePath holding every glyph contour, baseline at y = 0 and the first
            glyph origin at x = 0

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        buf = hb.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        hb.shape(self._hb_font, buf)

        scale = font_size_px / self.units_per_em
        pen = PathPen(self._glyph_set)
        x = 0.0
        y = 0.0
        missing = 0

        for info, pos in zip(buf.glyph_infos, buf.glyph_positions):
            if info.codepoint == 0:
                missing += 1
            glyph_name = font.getGlyphName(info.codepoint)
            transform = glyph_transform(scale, x + pos.x_offset, y + pos.y_offset)
            draw_glyph(self._glyph_set, glyph_name, pen, transform)
            x += pos.x_advance
            y += pos.y_advance

        if missing:
            logger.warning(
                "Characters not covered by font",
                font=self.resource,
                missing=missing,
            )

        return pen.path

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._hb_font = None
            self._glyph_set = None
            self._cmap = {}

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
