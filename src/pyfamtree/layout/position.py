"""Positioned tree and footprint classes for 2D layout."""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any, Self


@dataclass(frozen=True)
class Footprint:
    """Fixed visual size of a single drawn node.

    Attributes:
        width: Width of the node shape
        height: Height of the node shape
    """

    width: float = 100.0
    height: float = 80.0


@dataclass(frozen=True)
class PositionedNode:
    """A family member annotated with computed geometry.

    Produced by :func:`pyfamtree.layout.engine.layout`; never fed back
    into it.

    Attributes:
        id: Id of the logical member
        name: Display name of the logical member
        x: X coordinate of the footprint's top-left anchor
        y: Y coordinate of the footprint's top-left anchor
        width: Horizontal span reserved for this node's subtree
        children: Positioned children, in logical order
    """

    id: str
    name: str
    x: float
    y: float
    width: float
    children: tuple[Self, ...] = field(default_factory=tuple)

    @property
    def slot(self) -> tuple[float, float]:
        """Get the (left, right) edges of the subtree slot centered on x."""
        half = self.width / 2
        return (self.x - half, self.x + half)

    def anchor(self, footprint: Footprint) -> tuple[float, float]:
        """Get the center point of this node's drawn footprint."""
        return (self.x + footprint.width / 2, self.y + footprint.height / 2)

    def iter_nodes(self) -> Iterator[Self]:
        """Iterate over this subtree in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def edges(self) -> Iterator[tuple[Self, Self]]:
        """Iterate over (parent, child) pairs of this subtree."""
        for child in self.children:
            yield (self, child)
            yield from child.edges()

    def translate(self, dx: float, dy: float = 0.0) -> Self:
        """Create a new subtree shifted by the given amounts."""
        return replace(
            self,
            x=self.x + dx,
            y=self.y + dy,
            children=tuple(child.translate(dx, dy) for child in self.children),
        )

    def with_x(self, x: float) -> Self:
        """Create a copy with only this node's own x replaced."""
        return replace(self, x=x)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"PositionedNode({self.id!r}, x={self.x:.2f}, y={self.y:.2f}, "
            f"w={self.width:.2f}, children={len(self.children)})"
        )
