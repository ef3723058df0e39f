"""Shared fixtures: small synthetic fonts with outlines of known length.

Both fonts use 1000 units per em and contain:
- H: a 600 x 600 square (perimeter 2400 units)
- O: a circle of radius 300 (perimeter ~1885 units)
- alef (U+0627): a 100 x 800 rectangle (perimeter 1800 units)
- space: no contours

The CFF font draws O with cubic curves, the TrueType font with quadratic
curves. The TrueType font also has T, a composite glyph referencing H.
"""

import math
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000
SQUARE_SIDE = 600
CIRCLE_RADIUS = 300
ALEF_WIDTH = 100
ALEF_HEIGHT = 800

ADVANCES = {
    ".notdef": 500,
    "space": 250,
    "H": 700,
    "O": 700,
    "T": 700,
    "uni0627": 300,
}

KAPPA = 0.5522847498


def draw_rect(pen, x0: float, y0: float, width: float, height: float) -> None:
    pen.moveTo((x0, y0))
    pen.lineTo((x0 + width, y0))
    pen.lineTo((x0 + width, y0 + height))
    pen.lineTo((x0, y0 + height))
    pen.closePath()


def draw_cubic_circle(pen, cx: float, cy: float, r: float) -> None:
    k = KAPPA * r
    pen.moveTo((cx, cy + r))
    pen.curveTo((cx + k, cy + r), (cx + r, cy + k), (cx + r, cy))
    pen.curveTo((cx + r, cy - k), (cx + k, cy - r), (cx, cy - r))
    pen.curveTo((cx - k, cy - r), (cx - r, cy - k), (cx - r, cy))
    pen.curveTo((cx - r, cy + k), (cx - k, cy + r), (cx, cy + r))
    pen.closePath()


def draw_quadratic_circle(pen, cx: float, cy: float, r: float, segments: int = 8) -> None:
    step = 2 * math.pi / segments
    control_r = r / math.cos(step / 2)
    pen.moveTo((cx + r, cy))
    for i in range(1, segments + 1):
        mid = (i - 0.5) * step
        end = i * step
        pen.qCurveTo(
            (cx + control_r * math.cos(mid), cy + control_r * math.sin(mid)),
            (cx + r * math.cos(end), cy + r * math.sin(end)),
        )
    pen.closePath()


def _finish(fb: FontBuilder, family: str, path: Path) -> Path:
    fb.setupHorizontalMetrics({name: (advance, 0) for name, advance in ADVANCES.items()})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
    )
    fb.setupPost()
    fb.save(str(path))
    return path


CMAP = {
    0x20: "space",
    ord("H"): "H",
    ord("O"): "O",
    0x0627: "uni0627",
}


def build_cff_font(path: Path) -> Path:
    """Build an OpenType/CFF font with cubic outlines."""
    fb = FontBuilder(UPM, isTTF=False)
    fb.setupGlyphOrder([".notdef", "space", "H", "O", "uni0627"])
    fb.setupCharacterMap(CMAP)

    char_strings = {}
    for name in (".notdef", "space", "H", "O", "uni0627"):
        pen = T2CharStringPen(ADVANCES[name], None)
        if name == "H":
            draw_rect(pen, 0, 0, SQUARE_SIDE, SQUARE_SIDE)
        elif name == "O":
            draw_cubic_circle(pen, 350, CIRCLE_RADIUS, CIRCLE_RADIUS)
        elif name == "uni0627":
            draw_rect(pen, 100, 0, ALEF_WIDTH, ALEF_HEIGHT)
        char_strings[name] = pen.getCharString()

    fb.setupCFF("TestCubic-Regular", {"FullName": "Test Cubic"}, char_strings, {})
    return _finish(fb, "Test Cubic", path)


def build_truetype_font(path: Path) -> Path:
    """Build a TrueType font with quadratic outlines and a composite glyph."""
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "H", "O", "T", "uni0627"])
    fb.setupCharacterMap({**CMAP, ord("T"): "T"})

    glyphs = {}
    glyphs[".notdef"] = TTGlyphPen(None).glyph()
    glyphs["space"] = TTGlyphPen(None).glyph()

    pen = TTGlyphPen(None)
    draw_rect(pen, 0, 0, SQUARE_SIDE, SQUARE_SIDE)
    glyphs["H"] = pen.glyph()

    pen = TTGlyphPen(None)
    draw_quadratic_circle(pen, 350, CIRCLE_RADIUS, CIRCLE_RADIUS)
    glyphs["O"] = pen.glyph()

    pen = TTGlyphPen(glyphs)
    pen.addComponent("H", (1, 0, 0, 1, 50, 0))
    glyphs["T"] = pen.glyph()

    pen = TTGlyphPen(None)
    draw_rect(pen, 100, 0, ALEF_WIDTH, ALEF_HEIGHT)
    glyphs["uni0627"] = pen.glyph()

    fb.setupGlyf(glyphs)
    return _finish(fb, "Test Quadratic", path)


@pytest.fixture(scope="session")
def fonts_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("fonts")


@pytest.fixture(scope="session")
def cff_font(fonts_dir: Path) -> Path:
    """Path to the cubic-outline test font."""
    return build_cff_font(fonts_dir / "TestCubic-Regular.otf")


@pytest.fixture(scope="session")
def truetype_font(fonts_dir: Path) -> Path:
    """Path to the quadratic-outline test font."""
    return build_truetype_font(fonts_dir / "TestQuadratic-Regular.ttf")


@pytest.fixture(params=["cff_font", "truetype_font"])
def any_font(request: pytest.FixtureRequest) -> Path:
    """Each test font in turn."""
    return request.getfixturevalue(request.param)


@pytest.fixture
def garbage_font(tmp_path: Path) -> Path:
    """A file with a font extension that is not a font."""
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"this is not a font file" * 10)
    return path
