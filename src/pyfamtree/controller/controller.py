"""Main controller for the application.

Holds the current family tree snapshot, applies edits through the
persistent builder and recomputes the layout after every change.
"""

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from pyfamtree.layout.engine import LayoutConfig, LayoutEngine, LayoutResult
from pyfamtree.model.builder import IdFactory, add_child, new_member, validate_tree
from pyfamtree.model.node import LogicalNode

logger = logging.getLogger(__name__)


class TreeController(QObject):
    """Family tree application controller.

    Manages the tree state and coordinates between the model and layout
    layers. Views connect to the signals and never edit the tree directly.
    """

    # Signals for UI updates
    tree_changed = pyqtSignal(object)  # Emits new root (or None)
    layout_changed = pyqtSignal(object)  # Emits LayoutResult
    member_added = pyqtSignal(str, str)  # Emits (parent_id or "", new_id)
    config_changed = pyqtSignal(object)  # Emits new LayoutConfig

    def __init__(
        self,
        config: LayoutConfig | None = None,
        id_factory: IdFactory | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            config: Layout configuration (uses defaults if None)
            id_factory: Id generator for new members
        """
        super().__init__()

        self._layout_engine = LayoutEngine(config)
        self._id_factory = id_factory
        self._root: LogicalNode | None = None
        self._layout_result = self._layout_engine.calculate_layout(None)

    @property
    def root(self) -> LogicalNode | None:
        """Current tree snapshot."""
        return self._root

    @property
    def layout_result(self) -> LayoutResult:
        """Layout of the current snapshot."""
        return self._layout_result

    @property
    def config(self) -> LayoutConfig:
        """Active layout configuration."""
        return self._layout_engine.config

    @config.setter
    def config(self, config: LayoutConfig) -> None:
        self._layout_engine = LayoutEngine(config)
        self.config_changed.emit(config)
        self.relayout()

    def add_member(self, name: str, parent_id: str | None = None) -> str:
        """Add a family member.

        Without a parent (or while the tree is empty) the member becomes
        the new root, replacing any existing tree.

        Args:
            name: Display name of the new member
            parent_id: Id of the parent member

        Returns:
            Id of the new member

        Raises:
            ValidationError: If the name is empty
            NodeNotFoundError: If parent_id is not in the tree
        """
        member = new_member(name, self._id_factory)

        if parent_id is None or self._root is None:
            root = member
            parent_id = None
        else:
            root = add_child(self._root, parent_id, member)

        logger.info(f"Added {member.name!r} ({member.id}) under {parent_id or 'root'}")
        self._set_tree(root)
        self.member_added.emit(parent_id or "", member.id)
        return member.id

    def set_root(self, root: LogicalNode | None) -> None:
        """Replace the whole tree with a new snapshot.

        Raises:
            DuplicateIdError: If ids are not unique
            ValidationError: If a name is empty
        """
        if root is not None:
            validate_tree(root)
        self._set_tree(root)

    def clear(self) -> None:
        """Remove every member."""
        self._set_tree(None)

    def relayout(self) -> LayoutResult:
        """Recompute the layout of the current snapshot from scratch."""
        self._layout_result = self._layout_engine.calculate_layout(self._root)
        self.layout_changed.emit(self._layout_result)
        return self._layout_result

    def _set_tree(self, root: LogicalNode | None) -> None:
        # Commit only after the layout succeeds.
        result = self._layout_engine.calculate_layout(root)
        self._root = root
        self._layout_result = result
        self.tree_changed.emit(root)
        self.layout_changed.emit(result)
