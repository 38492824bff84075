"""String operations: searching, comparing, bounded copying, slicing and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; integer codes are taken as bytes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _check_non_negative(name: str, **values: int) -> None:
    for label, value in values.items():
        if value < 0:
            raise ValueError(f"{name}: {label} must not be negative, got {value}")


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None if it is absent.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None if it is absent.

    Searching for the NUL character finds the terminator, at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    The shorter string compares as if followed by NUL. Returns the difference
    of the codes of the first differing pair, or 0 when they agree.
    """
    _check_non_negative("strncmp", n=n)
    pairs = islice(zip_longest(a, b, fillvalue=_NUL), n)
    return next((ord(x) - ord(y) for x, y in pairs if x != y), 0)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index of the first match lying wholly inside that window, 0
    for an empty ``little``, and None when there is no match.
    """
    _check_non_negative("strnstr", length=length)
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters long (empty when
    ``size`` is 0), and the length of ``src``, the length it tried to create.
    """
    _check_non_negative("strlcpy", size=size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer nothing is appended and the length
    reported is ``len(src) + size``.
    """
    _check_non_negative("strlcat", size=size)
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("substr", start=start, length=length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    if a is None or b is None:
        raise TypeError("strjoin: both strings are required")
    return a + b


def strtrim(s: str, chars: str) -> str:
    """Remove every leading and trailing character of ``s`` found in ``chars``."""
    if s is None or chars is None:
        raise TypeError("strtrim: both the string and the set are required")
    return s.strip(chars)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        raise TypeError("strmapi: both the string and the function are required")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str],
    f: Callable[[int, str], str | None],
) -> None:
    """Call ``f(index, char)`` for each character of ``chars``, in order.

    A character returned by ``f`` replaces the one at that index in place;
    None leaves it unchanged.
    """
    if chars is None or f is None:
        return
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement