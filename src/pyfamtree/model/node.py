"""LogicalNode class representing a member of the family tree."""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any, Self

from pyfamtree.errors import ValidationError


@dataclass(frozen=True)
class LogicalNode:
    """A family member as edited by the user.

    Nodes are immutable; edits produce a new root (see
    :mod:`pyfamtree.model.builder`). Unchanged subtrees are shared between
    successive snapshots.

    Attributes:
        id: Unique identifier, stable across edits
        name: Display label (non-empty)
        children: Ordered children, placed left to right by the layout
    """

    id: str
    name: str
    children: tuple[Self, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence, store a tuple so the node stays hashable.
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        """Check if this member has no children."""
        return not self.children

    @property
    def node_count(self) -> int:
        """Get the number of members in this subtree, including self."""
        return 1 + sum(child.node_count for child in self.children)

    @property
    def depth(self) -> int:
        """Get the number of generations below this member (leaf = 0)."""
        if not self.children:
            return 0
        return 1 + max(child.depth for child in self.children)

    def iter_nodes(self) -> Iterator[Self]:
        """Iterate over this subtree in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find(self, node_id: str) -> Self | None:
        """Find a member by id in this subtree.

        Args:
            node_id: Id of the member to find

        Returns:
            The member if found, None otherwise
        """
        for node in self.iter_nodes():
            if node.id == node_id:
                return node
        return None

    def with_children(self, children: tuple[Self, ...] | list[Self]) -> Self:
        """Return a copy of this member with a different list of children."""
        return replace(self, children=tuple(children))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-compatible document shape."""
        return {
            "id": self.id,
            "name": self.name,
            "children": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Create a tree from a ``{"id", "name", "children"}`` document.

        Args:
            data: Parsed JSON object

        Returns:
            Root of the decoded tree

        Raises:
            ValidationError: If the document does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValidationError("node", data, "an object with 'id', 'name' and 'children'")

        node_id = data.get("id")
        name = data.get("name")
        children = data.get("children", [])
        if not isinstance(node_id, str) or not node_id:
            raise ValidationError("id", node_id, "a non-empty string")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("name", name, "a non-empty string")
        if not isinstance(children, list):
            raise ValidationError("children", children, "a list")

        return cls(
            id=node_id,
            name=name.strip(),
            children=tuple(cls.from_dict(child) for child in children),
        )

    def __repr__(self) -> str:
        """String representation of the node."""
        return f"LogicalNode({self.id!r}, {self.name!r}, children={len(self.children)})"
