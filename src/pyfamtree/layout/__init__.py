"""Layout engine for family tree visualization.

This module contains the tidy tree layout algorithm and the
geometry types describing its output.
"""

from pyfamtree.layout.box import Bounds, Viewport
from pyfamtree.layout.engine import (
    LayoutConfig,
    LayoutEngine,
    LayoutResult,
    bounds,
    center_root,
    layout,
)
from pyfamtree.layout.position import Footprint, PositionedNode

__all__ = [
    "Bounds",
    "Footprint",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "PositionedNode",
    "Viewport",
    "bounds",
    "center_root",
    "layout",
]
