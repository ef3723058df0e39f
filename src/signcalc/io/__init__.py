"""Font I/O layer for signcalc.

This module loads font resources using requests, fonttools and HarfBuzz and
turns shaped text into domain OutlinePath objects.

Key responsibilities:
- Fetch fonts from disk or over HTTP
- Parse TTF/OTF fonts and expose their metrics
- Shape text runs and draw their outlines
- Convert fonttools pen calls to domain path commands

Key classes:
- FontReader: Load a font and produce outline paths
- PathPen: fonttools pen recording domain path commands
"""

from signcalc.io.converter import PathPen
from signcalc.io.reader import FontReader, reference_char
from signcalc.io.source import fetch_font_bytes

__all__ = [
    "FontReader",
    "PathPen",
    "fetch_font_bytes",
    "reference_char",
]
