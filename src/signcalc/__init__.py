"""SignCalc - Measure the cut perimeter of sign lettering.

SignCalc converts text set in a TrueType/OpenType font into outline paths at a
calibrated physical letter height and integrates the length of every contour.
The result is the trace length a cutting tool would follow, used to quote
channel letters, neon and other contour-priced signage.

Example:
    $ signcalc measure "OPEN" --font Montserrat-Black.ttf --height 0.4

This prints the total contour length of the four letters when the letter H of
the font is 40 cm tall.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
