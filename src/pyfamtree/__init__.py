"""pyfamtree - tidy tree layout for family trees.

Build a family tree with persistent edits, lay it out so siblings never
overlap and parents sit over their children, and size a viewport from
the result.
"""

from pyfamtree.layout import (
    Bounds,
    Footprint,
    LayoutConfig,
    LayoutEngine,
    LayoutResult,
    PositionedNode,
    Viewport,
    bounds,
    center_root,
    layout,
)
from pyfamtree.model import LogicalNode, add_child, add_root, new_member

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "Footprint",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "LogicalNode",
    "PositionedNode",
    "Viewport",
    "add_child",
    "add_root",
    "bounds",
    "center_root",
    "layout",
    "new_member",
]
