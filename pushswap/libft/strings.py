"""String helpers: measuring, searching, copying, splitting and number conversion."""

from __future__ import annotations

from typing import Callable, MutableSequence

_WHITESPACE = "\f\n \r\t\v"
_TERMINATOR = "\0"


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` so the result holds at most ``size - 1`` characters.

    Returns the result and the length the full concatenation would have had,
    or ``size + len(src)`` when ``size`` is smaller than ``dest``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(src)
    total = size + len(src) if size < len(dest) else len(dest) + len(src)
    room = max(0, size - 1 - len(dest))
    return dest + src[:room], total


def _find_target(char: str) -> str:
    if len(char) > 1:
        raise ValueError("expected a single character")
    return char


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; the terminator matches at the end."""
    char = _find_target(char)
    if char in ("", _TERMINATOR):
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; the terminator matches at the end."""
    char = _find_target(char)
    if char in ("", _TERMINATOR):
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters; the sign gives the ordering."""
    if length <= 0:
        return 0
    for a, b in zip(first[: length - 1], second[: length - 1]):
        if a != b:
            return ord(a) - ord(b)
    i = min(len(first), len(second), length - 1)
    a = ord(first[i]) if i < len(first) else 0
    b = ord(second[i]) if i < len(second) else 0
    return a - b


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenation of the two strings."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """``text`` without leading and trailing characters found in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: MutableSequence[str], func: Callable[[int, str], str | None]) -> None:
    """Call ``func(index, char)`` on each character, in place.

    A non-None result replaces the character at that index.
    """
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return "".join(text)


def split(text: str, sep: str) -> list[str]:
    """Non-empty words of ``text`` separated by the character ``sep``."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def _digits_value(text: str, start: int) -> int:
    value = 0
    for char in text[start:]:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return value


def _skip_whitespace(text: str) -> int:
    return len(text) - len(text.lstrip(_WHITESPACE))


def atoi(text: str) -> int:
    """Leading decimal number of ``text`` as a 32-bit signed integer.

    Whitespace may precede one optional sign; parsing stops at the first
    non-digit. Values outside 32 bits wrap around.
    """
    i = _skip_whitespace(text)
    sign = 1
    if text[i : i + 1] == "-":
        sign = -1
        i += 1
    elif text[i : i + 1] == "+":
        i += 1
    value = sign * _digits_value(text, i)
    return (value + 2**31) % 2**32 - 2**31


def atoi_long(text: str) -> int:
    """Leading decimal number of ``text`` without range limit.

    A sign is recognised only as the very first character, so a sign after
    leading whitespace yields 0.
    """
    i = _skip_whitespace(text)
    sign = 1
    if text[:1] == "-":
        sign = -1
        i += 1
    elif text[:1] == "+":
        i += 1
    return sign * _digits_value(text, i)


def itoa(number: int) -> str:
    """Decimal representation of ``number``."""
    return str(int(number))