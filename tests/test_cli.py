#!/usr/bin/env python3
"""Unit tests for the pyfamtree command line."""

import contextlib
import io
import json
import sys
import tempfile
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pyfamtree.__main__ import main, parse_args

TREE = {
    "id": "r",
    "name": "Root",
    "children": [
        {"id": "a", "name": "A", "children": []},
        {"id": "b", "name": "B", "children": []},
    ],
}


def run_cli(args: list[str], document: str | bytes) -> tuple[int, str, str]:
    """Write ``document`` to a temporary file and run the CLI on it."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "tree.json"
        if isinstance(document, bytes):
            path.write_bytes(document)
        else:
            path.write_text(document, encoding="utf-8")
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main([str(path), *args])
    return code, out.getvalue(), err.getvalue()


def test_parse_args_defaults():
    """Defaults mirror the layout configuration."""
    args = parse_args([])

    assert args.tree is None
    assert args.spacing_x == 180
    assert args.spacing_y == 160
    assert args.root_y == 80
    assert not args.center_root

    print("✓ Argument defaults test passed")


def test_cli_prints_layout():
    """A valid document produces the layout as JSON."""
    code, out, _ = run_cli(["--indent", "0"], json.dumps(TREE))

    assert code == 0
    data = json.loads(out)
    assert data["root"]["width"] == 450
    assert [c["x"] for c in data["root"]["children"]] == [-135, 135]
    assert data["bounds"] == {"minX": -135, "maxX": 235, "minY": 80, "maxY": 320}
    assert data["viewport"]["viewBox"] == "-215 0 900 700"
    assert data["connections"] == [["r", "a"], ["r", "b"]]

    print("✓ CLI layout output test passed")


def test_cli_options_change_layout():
    """Spacing flags are passed to the engine."""
    code, out, _ = run_cli(["--spacing-x", "100", "--root-y", "0"], json.dumps(TREE))

    assert code == 0
    data = json.loads(out)
    assert [c["x"] for c in data["root"]["children"]] == [-75, 75]
    assert data["root"]["y"] == 0

    print("✓ CLI options test passed")


def test_cli_rejects_bad_input():
    """Invalid documents and settings exit with status 1."""
    duplicate = dict(TREE, children=[{"id": "r", "name": "Again"}])
    cases = [
        ([], "not json"),
        ([], json.dumps({"id": "r"})),
        ([], json.dumps(duplicate)),
        (["--spacing-x", "0"], json.dumps(TREE)),
        (["--indent", "20"], json.dumps(TREE)),
    ]
    for args, document in cases:
        code, out, err = run_cli(args, document)
        assert code == 1, (args, document)
        assert out == ""
        assert err.startswith("Error:")

    print("✓ CLI bad input test passed")


def test_cli_rejects_non_utf8_file():
    """Undecodable bytes are reported as an input error."""
    code, out, err = run_cli([], b'{"id": "r", "name": "\xff\xfe"}')

    assert code == 1
    assert out == ""
    assert err.startswith("Error:")

    print("✓ CLI non UTF-8 input test passed")


def test_cli_rejects_deeply_nested_document():
    """A document nested beyond the recursion limit exits with status 1."""
    depth = sys.getrecursionlimit() * 5
    document = '{"id": "n", "name": "N", "children": [' * depth + "]}" * depth

    code, out, err = run_cli([], document)

    assert code == 1
    assert out == ""
    assert err.startswith("Error:")

    print("✓ CLI deep document test passed")


def test_cli_reads_stdin():
    """Without a path the document is read from standard input."""
    out = io.StringIO()
    saved_stdin = sys.stdin
    sys.stdin = io.StringIO(json.dumps(TREE))
    try:
        with contextlib.redirect_stdout(out):
            code = main(["--indent", "0"])
    finally:
        sys.stdin = saved_stdin

    assert code == 0
    data = json.loads(out.getvalue())
    assert data["root"]["width"] == 450
    assert [c["x"] for c in data["root"]["children"]] == [-135, 135]

    print("✓ CLI stdin test passed")


def test_cli_missing_file():
    """A missing document is reported instead of raising."""
    err = io.StringIO()
    with contextlib.redirect_stderr(err):
        code = main([str(Path(tempfile.gettempdir()) / "pyfamtree-missing" / "tree.json")])

    assert code == 1
    assert "Error:" in err.getvalue()

    print("✓ CLI missing file test passed")


def run_all_tests():
    """Run all CLI tests."""
    print("=== Running CLI Tests ===\n")

    test_parse_args_defaults()
    test_cli_prints_layout()
    test_cli_options_change_layout()
    test_cli_rejects_bad_input()
    test_cli_rejects_non_utf8_file()
    test_cli_rejects_deeply_nested_document()
    test_cli_reads_stdin()
    test_cli_missing_file()

    print("\n=== All CLI Tests Passed! ===")


if __name__ == "__main__":
    run_all_tests()
