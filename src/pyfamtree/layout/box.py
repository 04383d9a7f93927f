"""Bounding box and viewport for the positioned tree."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box enclosing every node footprint of a tree.

    Attributes:
        min_x: Left edge
        max_x: Right edge
        min_y: Top edge
        max_y: Bottom edge
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        """Horizontal extent."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Vertical extent."""
        return self.max_y - self.min_y

    @property
    def center_x(self) -> float:
        """Horizontal midpoint."""
        return (self.min_x + self.max_x) / 2

    @property
    def center_y(self) -> float:
        """Vertical midpoint."""
        return (self.min_y + self.max_y) / 2

    def padded(self, padding: float) -> "Bounds":
        """Create a new box grown by ``padding`` on every side."""
        return Bounds(
            min_x=self.min_x - padding,
            max_x=self.max_x + padding,
            min_y=self.min_y - padding,
            max_y=self.max_y + padding,
        )

    def intersects(self, other: "Bounds") -> bool:
        """Check if this box overlaps another (touching edges do not count).

        Args:
            other: Other box to check intersection with

        Returns:
            True if the boxes intersect, False otherwise
        """
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
        )

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is inside this box."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_dict(self) -> dict[str, float]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "minX": self.min_x,
            "maxX": self.max_x,
            "minY": self.min_y,
            "maxY": self.max_y,
        }


@dataclass(frozen=True)
class Viewport:
    """Drawing area that frames the tree.

    Attributes:
        x: Left edge of the visible area
        y: Top edge of the visible area
        width: Visible width
        height: Visible height
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 900.0
    height: float = 700.0

    @property
    def view_box(self) -> str:
        """SVG ``viewBox`` attribute value."""
        return f"{self.x:g} {self.y:g} {self.width:g} {self.height:g}"

    @classmethod
    def from_bounds(
        cls,
        bounds: Bounds,
        padding: float = 80.0,
        min_width: float = 900.0,
        min_height: float = 700.0,
    ) -> "Viewport":
        """Frame ``bounds`` with ``padding``, never smaller than the minimum size.

        Args:
            bounds: Tree bounding box
            padding: Space added on every side
            min_width: Smallest viewport width
            min_height: Smallest viewport height

        Returns:
            A new Viewport instance
        """
        return cls(
            x=bounds.min_x - padding,
            y=bounds.min_y - padding,
            width=max(bounds.width + padding * 2, min_width),
            height=max(bounds.height + padding * 2, min_height),
        )

    def to_dict(self) -> dict[str, float | str]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "viewBox": self.view_box,
        }
