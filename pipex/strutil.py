"""String helpers with C-library semantics: splitting, trimming, bounded
copies, searches and comparisons."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Tuple, Union

__all__ = [
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "memcmp",
    "strlcpy",
    "strlcat",
    "map_indexed",
]

BytesLike = Union[bytes, bytearray, memoryview]


def _check_size(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces.

    Runs of separators, and separators at either end, produce no empty
    words.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in *chars* from both ends of *text*."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A start at or past the end of the text yields the empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *length* characters.

    Returns the index of the first match, 0 for an empty needle, or None
    when there is no match.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _codes(text: Union[str, BytesLike]):
    if isinstance(text, str):
        return (ord(ch) for ch in text)
    return iter(bytes(text))


def strncmp(first: Union[str, BytesLike], second: Union[str, BytesLike], n: int) -> int:
    """Compare at most *n* characters, stopping at a NUL or the end.

    The end of a string counts as a NUL. Returns the difference of the
    first unequal character codes, or 0 if none differ.
    """
    _check_size("n", n)
    pairs = zip_longest(_codes(first), _codes(second), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first unequal bytes, or 0. Raises
    ValueError when either buffer is shorter than *n*.
    """
    _check_size("n", n)
    left = bytes(first)
    right = bytes(second)
    if n > len(left) or n > len(right):
        raise ValueError(f"cannot compare {n} bytes: buffers hold {len(left)} and {len(right)}")
    for a, b in zip(left[:n], right[:n]):
        if a != b:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the copied text, which holds at most ``size - 1`` characters,
    and the full length of *src*, from which truncation can be detected.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation
    would have needed; when *dest* already fills the buffer that length
    is ``size + len(src)`` and *dest* is left as it is.
    """
    _check_size("size", size)
    dest_len = len(dest)
    result = dest
    if size > 0 and dest_len < size - 1:
        result = dest + src[:size - 1 - dest_len]
    return result, min(dest_len, size) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    pieces = []
    for index, ch in enumerate(text):
        mapped = func(index, ch)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(f"mapping function must return one character, got {mapped!r}")
        pieces.append(mapped)
    return "".join(pieces)