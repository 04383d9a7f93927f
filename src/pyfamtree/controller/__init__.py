"""Controller layer for pyfamtree.

- TreeController: holds the tree snapshot and re-runs the layout on edits
"""

from pyfamtree.controller.controller import TreeController

__all__ = ["TreeController"]
