"""Move between registered gate endpoints."""

from __future__ import annotations

import sys


def usage() -> str:
    """Return the short usage message."""
    return (
        "BLINK::\n"
        " Filesystem movement tool\n"
        " Maneuver between different registered gates\n"
        "\t$blnk -[flags] [gate tag]\n\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the blink command line tool."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(usage(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())