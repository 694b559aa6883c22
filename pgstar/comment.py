"""Rendering of wrapped line comments."""

from __future__ import annotations

from typing import Any, Iterator

_COMMENT_PREFIX = "//"


def _sprint(args: tuple[Any, ...]) -> str:
    parts: list[str] = []
    previous: Any = None
    for index, arg in enumerate(args):
        if index and not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(str(arg))
        previous = arg
    return "".join(parts)


def _next_token(data: bytes, width: int) -> tuple[int, bytes | None]:
    """Return (bytes consumed, token) for the next wrapped segment of data."""
    runes: list[tuple[int, str, int]] = []
    offset = 0
    for char in data.decode("utf-8"):
        size = len(char.encode("utf-8"))
        runes.append((offset, char, size))
        offset += size

    start = len(data)
    first = len(runes)
    for index, (pos, char, _) in enumerate(runes):
        if not char.isspace():
            start, first = pos, index
            break

    last_space = 0
    for pos, char, size in runes[first:]:
        if char.isspace():
            if pos >= width:
                if last_space == 0:
                    return pos + size, data[start:pos]
                return last_space, data[start:last_space]
            last_space = pos

    if len(data) > start:
        return len(data), data[start:].decode("utf-8").strip().encode("utf-8")
    return start, None


def _wrap(text: str, width: int) -> Iterator[str]:
    data = text.encode("utf-8")
    while data:
        advance, token = _next_token(data, width)
        if token is not None:
            yield token.decode("utf-8")
        if advance == 0:
            break
        data = data[advance:]


def c(wrap: int, *args: Any) -> str:
    """Return a comment block, wrapping lines that would exceed wrap characters."""
    return "".join(
        f"{_COMMENT_PREFIX} {line}\n" for line in _wrap(_sprint(args), wrap - 3)
    )


def c80(*args: Any) -> str:
    """Shorthand for c(80, *args)."""
    return c(80, *args)