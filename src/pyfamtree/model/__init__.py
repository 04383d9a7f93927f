"""Model layer for pyfamtree.

This module contains the immutable family tree nodes and the
persistent edit operations that produce new tree snapshots.
"""

from pyfamtree.model.builder import (
    add_child,
    add_root,
    counter_ids,
    new_member,
    random_id,
    validate_tree,
)
from pyfamtree.model.node import LogicalNode

__all__ = [
    "LogicalNode",
    "add_child",
    "add_root",
    "counter_ids",
    "new_member",
    "random_id",
    "validate_tree",
]
