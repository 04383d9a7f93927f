"""Main entry point for pyfamtree."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pyfamtree.errors import FamilyTreeError, ValidationError, validate_range
from pyfamtree.layout.engine import LayoutConfig, LayoutEngine
from pyfamtree.model.builder import validate_tree
from pyfamtree.model.node import LogicalNode

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    defaults = LayoutConfig()
    parser = argparse.ArgumentParser(
        prog="pyfamtree",
        description="Family tree layout - compute node positions for a tree document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The input document is a JSON object of the form\n"
            '  {"id": "a", "name": "Alice", "children": [...]}'
        ),
    )
    parser.add_argument(
        "tree",
        nargs="?",
        type=Path,
        default=None,
        help="JSON tree document (default: read from stdin)",
    )
    parser.add_argument(
        "--spacing-x",
        type=float,
        default=defaults.spacing_x,
        metavar="N",
        help=f"Horizontal slot per leaf (default: {defaults.spacing_x:g})",
    )
    parser.add_argument(
        "--spacing-y",
        type=float,
        default=defaults.spacing_y,
        metavar="N",
        help=f"Vertical distance between generations (default: {defaults.spacing_y:g})",
    )
    parser.add_argument(
        "--root-x",
        type=float,
        default=defaults.root_x,
        metavar="N",
        help=f"X anchor of the root (default: {defaults.root_x:g})",
    )
    parser.add_argument(
        "--root-y",
        type=float,
        default=defaults.root_y,
        metavar="N",
        help=f"Y anchor of the root (default: {defaults.root_y:g})",
    )
    parser.add_argument(
        "--padding",
        type=float,
        default=defaults.padding,
        metavar="N",
        help=f"Viewport padding around the tree (default: {defaults.padding:g})",
    )
    parser.add_argument(
        "--center-root",
        action="store_true",
        help="Move the root to the horizontal middle of the whole tree",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        metavar="N",
        help="JSON output indentation, 0 for compact output (default: 2)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log layout details to stderr",
    )
    return parser.parse_args(argv)


def load_tree(path: Path | None) -> LogicalNode:
    """Read and validate a tree document.

    Args:
        path: Document path, or None for stdin

    Returns:
        Root of the decoded tree

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8 text
        json.JSONDecodeError: If the document is not JSON
        FamilyTreeError: If the document is not a valid tree
    """
    text = sys.stdin.read() if path is None else path.read_text(encoding="utf-8")
    try:
        root = LogicalNode.from_dict(json.loads(text))
    except RecursionError as e:
        raise ValidationError("tree", "<document>", "a less deeply nested document") from e
    validate_tree(root)
    return root


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_range(args.indent, 0, 8, "indent")
        config = LayoutConfig(
            spacing_x=args.spacing_x,
            spacing_y=args.spacing_y,
            root_x=args.root_x,
            root_y=args.root_y,
            padding=args.padding,
            center_root=args.center_root,
        )
        engine = LayoutEngine(config)
        root = load_tree(args.tree)
        result = engine.calculate_layout(root)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, FamilyTreeError) as e:
        logger.debug("Input rejected", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
