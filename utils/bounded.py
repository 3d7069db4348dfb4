"""
utils/bounded.py
----------------

Fixed-capacity text sink used by the phrase pluralizer and the option parser.

A buffer of capacity `k` holds at most `k - 1` characters: one slot is kept
for the terminator of the fixed-size buffers the template system hands out,
so callers can size buffers the same way on both sides. Writes past the limit
are dropped silently; truncation is a defined outcome, not an error.

    buf = BoundedBuffer(5)
    buf.write("swords")   # -> 4
    buf.getvalue()        # -> "swor"
"""

from __future__ import annotations

from typing import List


def check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"Buffer capacity must be >= 0 (got {capacity}).")
    return capacity


def clip(text: str, capacity: int) -> str:
    """Return the part of `text` that fits in a buffer of `capacity`."""
    return text[: max(check_capacity(capacity) - 1, 0)]


class BoundedBuffer:
    """Append-only text buffer that never grows beyond `capacity - 1`."""

    def __init__(self, capacity: int) -> None:
        self.capacity = check_capacity(capacity)
        self._chars: List[str] = []

    @property
    def limit(self) -> int:
        """Maximum number of content characters."""
        return max(self.capacity - 1, 0)

    @property
    def full(self) -> bool:
        return len(self._chars) >= self.limit

    def write(self, text: str) -> int:
        """Append as much of `text` as fits; return the number of chars kept."""
        room = self.limit - len(self._chars)
        if room <= 0 or not text:
            return 0
        chunk = text[:room]
        self._chars.extend(chunk)
        return len(chunk)

    def rewind(self, position: int) -> str:
        """Drop everything from `position` onwards and return what was dropped."""
        position = max(0, min(position, len(self._chars)))
        dropped = "".join(self._chars[position:])
        del self._chars[position:]
        return dropped

    def getvalue(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"BoundedBuffer(capacity={self.capacity}, value={self.getvalue()!r})"


__all__ = ["BoundedBuffer", "check_capacity", "clip"]
