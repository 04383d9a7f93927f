"""Direct entry point for the pyfamtree console script."""

import sys


def main() -> int:
    """Entry point for pyfamtree command.

    Returns:
        Exit code
    """
    from pyfamtree.__main__ import main as _main
    return _main()


if __name__ == "__main__":
    sys.exit(main())
