"""Command-line entry point: print instructions that sort the given numbers."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.libft.strings import split
from pushswap.parsing import InputError, check_args, parse_arguments
from pushswap.printf import printf
from pushswap.sorting import radix_sort
from pushswap.stacks import Stacks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run push_swap on ``argv`` (defaults to the process arguments) and
    return the exit status."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and args[0] == ""):
        printf("Error\n")
        return 1
    from_single_string = len(args) == 1
    if from_single_string:
        args = split(args[0], " ")
    try:
        check_args(args)
        values = parse_arguments(args)
    except InputError:
        # A single quoted argument reports the error; separate ones fail silently.
        if from_single_string:
            printf("Error\n")
        return 1
    stacks = Stacks(values)
    if not stacks.is_sorted():
        radix_sort(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())