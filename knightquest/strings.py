"""String searching, comparison, slicing and transformation helpers."""

from __future__ import annotations

from typing import Callable, Optional

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on runs of the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points at the first position where
    they differ or where the first string ends, and 0 when they match.
    """
    _check_non_negative("n", n)
    for pos in range(n):
        left = ord(s1[pos]) if pos < len(s1) else 0
        right = ord(s2[pos]) if pos < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on every character in order.

    When ``func`` returns a string it takes the place of that character;
    when it returns None the character is kept. The resulting text is returned.
    """
    pieces = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        pieces.append(char if replacement is None else replacement)
    return "".join(pieces)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters) and the full
    length of ``src``, so truncation shows as a length of ``size`` or more.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` inside a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dest`` already fills the buffer it is left unchanged and
    the length reported is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    used = min(len(dest), size)
    if used == size:
        return dest, size + len(src)
    room = size - 1 - used
    return dest[:used] + src[:room], used + len(src)