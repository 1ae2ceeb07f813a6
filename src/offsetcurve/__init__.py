"""Offsetcurve - Resolve clean offset curves for lines.

Offsetcurve builds the raw offset of a line at a signed distance, nodes the
raw curve so every self-intersection becomes an explicit vertex, and extracts
the shortest path through the noded arrangement from the curve's start point
to its end point. The result is a single simple line running parallel to the
input, suitable for generalization and cartographic rendering.

Example:
    $ offsetcurve "LINESTRING (0 10, 125 10, 75 0, 200 0)" --distance 5

This prints the resolved offset curve as WKT.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
