"""Checking and converting the command-line numbers."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.libft.strings import atoi_long, split

INT_MIN = -2147483648
INT_MAX = 2147483647


class PushSwapError(Exception):
    """Raised for any invalid input."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def check_argument(text: str) -> bool:
    """True if ``text`` holds only digits, spaces and well-placed signs."""
    signs = 0
    for index, char in enumerate(text):
        following = text[index + 1 : index + 2]
        bad_char = (
            not "0" <= char <= "9"
            and (char != "-" or following in ("", " "))
            and char != " "
            and char != "+"
        )
        if bad_char or signs > 1:
            return False
        if char in "-+":
            signs += 1
        if char == " ":
            signs -= 1
    return True


def check_arguments(args: Sequence[str]) -> bool:
    """True if every argument passes :func:`check_argument`."""
    return all(check_argument(arg) for arg in args)


def check_values(values: Sequence[int]) -> bool:
    """Validate the numbers and tell whether they are already in ascending order.

    Raises PushSwapError on a duplicate or a value outside the 32-bit range.
    """
    if len(set(values)) != len(values):
        raise PushSwapError()
    if any(not INT_MIN <= value <= INT_MAX for value in values):
        raise PushSwapError()
    return all(a < b for a, b in zip(values, values[1:]))


def parse_arguments(args: Sequence[str]) -> tuple[list[int], bool]:
    """Turn the arguments into numbers.

    A single argument is split on spaces; several arguments must each hold
    one number. Returns the numbers and whether they are already sorted.
    Raises PushSwapError on any invalid input.
    """
    if not check_arguments(args):
        raise PushSwapError()
    if len(args) == 1:
        words = split(args[0], " ")
    else:
        if any(" " in arg for arg in args):
            raise PushSwapError()
        words = list(args)
    values = [atoi_long(word) for word in words]
    if not values:
        return values, True
    return values, check_values(values)