"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import overload


def _code(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        return ord(value)
    return value


def isalpha(code: int | str) -> bool:
    """True for an ASCII letter."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def isdigit(code: int | str) -> bool:
    """True for an ASCII decimal digit."""
    c = _code(code)
    return ord("0") <= c <= ord("9")


def isalnum(code: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(code) <= 127


def isprint(code: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(code) <= 126


@overload
def toupper(code: int) -> int: ...
@overload
def toupper(code: str) -> str: ...
def toupper(code):
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    c = _code(code)
    result = c - 32 if ord("a") <= c <= ord("z") else c
    return chr(result) if isinstance(code, str) else result


@overload
def tolower(code: int) -> int: ...
@overload
def tolower(code: str) -> str: ...
def tolower(code):
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    c = _code(code)
    result = c + 32 if ord("A") <= c <= ord("Z") else c
    return chr(result) if isinstance(code, str) else result