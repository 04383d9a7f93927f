"""Tidy tree layout engine for family tree visualization."""

import logging
import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from pyfamtree.errors import LayoutError, validate_positive, validate_range
from pyfamtree.layout.box import Bounds, Viewport
from pyfamtree.layout.position import Footprint, PositionedNode
from pyfamtree.model.node import LogicalNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    """Configuration for the layout engine.

    Attributes:
        spacing_x: Minimum horizontal slot reserved for a leaf
        spacing_y: Vertical distance between generations
        root_x: X anchor of the root
        root_y: Y anchor of the root
        node_width: Width of a drawn node
        node_height: Height of a drawn node
        padding: Space around the tree inside the viewport
        min_width: Smallest viewport width
        min_height: Smallest viewport height
        center_root: Move the root to the horizontal middle of the whole tree
    """

    spacing_x: float = 180.0
    spacing_y: float = 160.0
    root_x: float = 0.0
    root_y: float = 80.0
    node_width: float = 100.0
    node_height: float = 80.0
    padding: float = 80.0
    min_width: float = 900.0
    min_height: float = 700.0
    center_root: bool = False

    @property
    def footprint(self) -> Footprint:
        """Size of a single drawn node."""
        return Footprint(width=self.node_width, height=self.node_height)

    def validate(self) -> None:
        """Check every size is usable.

        Raises:
            ValidationError: If a spacing or size is not a positive number
        """
        validate_positive(self.spacing_x, "spacing_x")
        validate_positive(self.spacing_y, "spacing_y")
        validate_positive(self.node_width, "node_width")
        validate_positive(self.node_height, "node_height")
        validate_positive(self.min_width, "min_width")
        validate_positive(self.min_height, "min_height")
        validate_range(self.padding, 0, math.inf, "padding")


@dataclass
class LayoutResult:
    """Result of a layout operation.

    Attributes:
        root: Positioned tree (None when there is nothing to lay out)
        bounds: Box enclosing every node footprint
        viewport: Drawing area framing the tree
    """

    root: PositionedNode | None = None
    bounds: Bounds | None = None
    viewport: Viewport = field(default_factory=Viewport)

    @property
    def positions(self) -> dict[str, PositionedNode]:
        """Dictionary mapping member ids to positioned nodes."""
        if self.root is None:
            return {}
        return {node.id: node for node in self.root.iter_nodes()}

    @property
    def connections(self) -> list[tuple[str, str]]:
        """List of (parent_id, child_id) tuples for connections."""
        if self.root is None:
            return []
        return [(parent.id, child.id) for parent, child in self.root.edges()]

    @property
    def node_count(self) -> int:
        """Number of positioned members."""
        return len(self.positions)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "root": self.root.to_dict() if self.root is not None else None,
            "bounds": self.bounds.to_dict() if self.bounds is not None else None,
            "viewport": self.viewport.to_dict(),
            "connections": [list(pair) for pair in self.connections],
        }


@dataclass
class _Measure:
    """Subtree width and slot centers relative to the packing origin."""

    width: float
    center: float = 0.0
    slots: list[float] = field(default_factory=list)
    children: list["_Measure"] = field(default_factory=list)


def _measure(node: LogicalNode, spacing_x: float) -> _Measure:
    """Compute subtree widths and child slot centers bottom-up."""
    if not node.children:
        return _Measure(width=spacing_x)

    children = [_measure(child, spacing_x) for child in node.children]
    gap = spacing_x * 0.5
    total = sum(c.width for c in children) + gap * (len(children) - 1)
    width = max(total, spacing_x)

    slots = []
    current_x = -width / 2
    for child in children:
        slots.append(current_x + child.width / 2)
        current_x += child.width + gap

    center = slots[0] if len(slots) == 1 else (slots[0] + slots[-1]) / 2
    return _Measure(width=width, center=center, slots=slots, children=children)


def _place(
    node: LogicalNode,
    measure: _Measure,
    x: float,
    y: float,
    spacing_y: float,
) -> PositionedNode:
    """Attach absolute positions, with ``x`` already the node's final x."""
    origin = x - measure.center
    children = tuple(
        _place(child, child_measure, origin + slot, y + spacing_y, spacing_y)
        for child, child_measure, slot in zip(node.children, measure.children, measure.slots)
    )
    return PositionedNode(
        id=node.id,
        name=node.name,
        x=x,
        y=y,
        width=measure.width,
        children=children,
    )


def layout(
    node: LogicalNode,
    x: float,
    y: float,
    spacing_x: float,
    spacing_y: float,
) -> PositionedNode:
    """Lay out a tree so siblings never overlap and parents sit over their children.

    Children are packed left to right from ``x - width / 2``; each child is
    centered in a slot as wide as its own subtree, with ``spacing_x / 2``
    between slots, and carries its subtree along with it. A parent's x is
    the midpoint of its first and last child.

    Args:
        node: Root of the tree to lay out
        x: Anchor of the root; kept as-is for a childless root
        y: Y coordinate of the root
        spacing_x: Width of a leaf slot
        spacing_y: Distance between generations

    Returns:
        A new positioned tree; ``node`` is not modified

    Raises:
        ValidationError: If a spacing is not a positive finite number
        LayoutError: If the tree is too deep to traverse
    """
    validate_positive(spacing_x, "spacing_x")
    validate_positive(spacing_y, "spacing_y")

    try:
        measure = _measure(node, spacing_x)
        return _place(node, measure, x + measure.center, y, spacing_y)
    except RecursionError as e:
        raise LayoutError("tree is too deep or contains a cycle") from e


def bounds(positioned: PositionedNode, footprint: Footprint | None = None) -> Bounds:
    """Calculate the box enclosing every node footprint.

    Args:
        positioned: Positioned tree
        footprint: Size of a drawn node (defaults to 100x80)

    Returns:
        Bounding box of all footprints
    """
    footprint = footprint or Footprint()
    anchors = np.array([(n.x, n.y) for n in positioned.iter_nodes()], dtype=np.float64)
    low = anchors.min(axis=0)
    high = anchors.max(axis=0)
    return Bounds(
        min_x=float(low[0]),
        max_x=float(high[0]) + footprint.width,
        min_y=float(low[1]),
        max_y=float(high[1]) + footprint.height,
    )


def center_root(
    positioned: PositionedNode,
    tree_bounds: Bounds,
    footprint: Footprint | None = None,
) -> PositionedNode:
    """Move only the root so its footprint sits at the middle of the tree.

    This can disagree with the parent-over-children rule for lopsided
    trees, so it is an optional step applied after :func:`layout`.
    """
    footprint = footprint or Footprint()
    return positioned.with_x(tree_bounds.center_x - footprint.width / 2)


class LayoutEngine:
    """Engine for calculating 2D positions for family tree members."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize the layout engine.

        Args:
            config: Layout configuration (uses defaults if None)

        Raises:
            ValidationError: If the configuration is invalid
        """
        self.config = config or LayoutConfig()
        self.config.validate()

    def calculate_layout(self, root: LogicalNode | None) -> LayoutResult:
        """Calculate the layout for a family tree.

        Args:
            root: Root member, or None for an empty tree

        Returns:
            LayoutResult containing the positioned tree, bounds and viewport
        """
        config = self.config
        if root is None:
            return LayoutResult(
                viewport=Viewport(width=config.min_width, height=config.min_height),
            )

        positioned = layout(root, config.root_x, config.root_y, config.spacing_x, config.spacing_y)
        tree_bounds = bounds(positioned, config.footprint)
        if config.center_root:
            positioned = center_root(positioned, tree_bounds, config.footprint)

        viewport = Viewport.from_bounds(
            tree_bounds,
            padding=config.padding,
            min_width=config.min_width,
            min_height=config.min_height,
        )
        logger.debug(
            f"Laid out {root.node_count} members, width={positioned.width:g}, "
            f"bounds=({tree_bounds.min_x:g}, {tree_bounds.min_y:g})-({tree_bounds.max_x:g}, {tree_bounds.max_y:g})"
        )
        return LayoutResult(root=positioned, bounds=tree_bounds, viewport=viewport)
