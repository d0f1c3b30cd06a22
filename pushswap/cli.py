"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.chunksort import sort
from pushswap.parsing import PushSwapError, parse_arguments
from pushswap.stacks import Stacks

EXIT_ERROR = 255


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; print ``Error`` and fail on invalid input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or not args[0]:
        return 0
    try:
        values, already_sorted = parse_arguments(args)
    except PushSwapError:
        sys.stdout.write("Error\n")
        return EXIT_ERROR
    if already_sorted:
        return 0
    stacks = Stacks(values)
    sort(stacks)
    sys.stdout.write("".join(f"{move}\n" for move in stacks.moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())