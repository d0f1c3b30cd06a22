"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(char: str | int, stream: TextIO | None = None) -> None:
    """Write one character (a one-character string or a code point)."""
    text = chr(char) if isinstance(char, int) else char
    if len(text) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(text)


def putstr_fd(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def putendl_fd(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _target(stream)
    putstr_fd(text, out)
    out.write("\n")


def putnbr_fd(number: int, stream: TextIO | None = None) -> None:
    """Write ``number`` in decimal, with a leading minus sign when negative."""
    _target(stream).write(str(int(number)))