"""Persistent edit operations for the family tree.

Every operation returns a new root and leaves its input untouched, so the
layout engine always receives a stable snapshot. Only the path from the
root to the edited member is copied; every other subtree is shared by
reference with the previous snapshot.
"""

import itertools
import uuid
from collections.abc import Callable, Iterator

from pyfamtree.errors import DuplicateIdError, NodeNotFoundError, ValidationError
from pyfamtree.model.node import LogicalNode

IdFactory = Callable[[], str]


def random_id() -> str:
    """Generate a short collision-resistant member id."""
    return uuid.uuid4().hex[:12]


def counter_ids(prefix: str = "m", start: int = 1) -> IdFactory:
    """Create an id factory producing ``m1``, ``m2``, ...

    Useful when ids must be reproducible, e.g. in tests.

    Args:
        prefix: Text placed before the sequence number
        start: First sequence number

    Returns:
        Callable returning the next id on each call
    """
    counter: Iterator[int] = itertools.count(start)
    return lambda: f"{prefix}{next(counter)}"


def new_member(name: str, id_factory: IdFactory | None = None) -> LogicalNode:
    """Create a childless member.

    Args:
        name: Display name; surrounding whitespace is stripped
        id_factory: Id generator (defaults to :func:`random_id`)

    Returns:
        A new leaf node

    Raises:
        ValidationError: If the name is empty after stripping
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", name, "a non-empty string")
    make_id = id_factory or random_id
    return LogicalNode(id=make_id(), name=name.strip())


def add_root(name: str, id_factory: IdFactory | None = None) -> LogicalNode:
    """Start a new tree whose only member is ``name``."""
    return new_member(name, id_factory)


def add_child(root: LogicalNode, parent_id: str, child: LogicalNode) -> LogicalNode:
    """Append ``child`` as the last child of ``parent_id``.

    Args:
        root: Current tree snapshot
        parent_id: Id of the member receiving the child
        child: Member (or subtree) to attach

    Returns:
        New root; subtrees off the root-to-parent path are shared with ``root``

    Raises:
        NodeNotFoundError: If ``parent_id`` is not in the tree
        DuplicateIdError: If any id in ``child`` already exists in the tree
    """
    existing = {node.id for node in root.iter_nodes()}
    if parent_id not in existing:
        raise NodeNotFoundError(parent_id)
    for node in child.iter_nodes():
        if node.id in existing:
            raise DuplicateIdError(node.id)

    path = _path_to(root, parent_id)
    # Rebuild bottom-up along the path, reusing untouched siblings.
    updated = path[-1].with_children(path[-1].children + (child,))
    for ancestor, replaced in zip(reversed(path[:-1]), reversed(path[1:])):
        updated = ancestor.with_children(
            tuple(updated if c is replaced else c for c in ancestor.children)
        )
    return updated


def validate_tree(root: LogicalNode) -> None:
    """Check that ids are unique and names are non-empty.

    Raises:
        DuplicateIdError: If an id appears more than once
        ValidationError: If a name is empty
    """
    seen: set[str] = set()
    for node in root.iter_nodes():
        if node.id in seen:
            raise DuplicateIdError(node.id)
        seen.add(node.id)
        if not node.name.strip():
            raise ValidationError("name", node.name, "a non-empty string")


def _path_to(root: LogicalNode, node_id: str) -> list[LogicalNode]:
    """Return the nodes from ``root`` down to ``node_id`` (inclusive)."""
    stack: list[tuple[LogicalNode, list[LogicalNode]]] = [(root, [root])]
    while stack:
        node, path = stack.pop()
        if node.id == node_id:
            return path
        for child in reversed(node.children):
            stack.append((child, path + [child]))
    raise NodeNotFoundError(node_id)
