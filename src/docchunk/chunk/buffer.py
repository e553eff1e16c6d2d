"""Append / flush / reset accumulator shared by the splitters.

Each splitter creates its own buffer inside a single call, so no state
survives between calls.
"""

from __future__ import annotations

from docchunk.types import Fragment

__all__ = ["FragmentBuffer"]


class FragmentBuffer:
    """Accumulates text pieces and the span they cover in the original text."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0
        self._start: int | None = None
        self._end: int | None = None

    def __len__(self) -> int:
        return self._length

    def fits(self, text: str, limit: int) -> bool:
        """Whether appending *text* keeps the buffer within *limit* characters."""
        return self._length + len(text) <= limit

    def append(self, text: str, start: int | None = None, end: int | None = None) -> None:
        """Add a piece; spans only widen, the first known start wins."""
        self._parts.append(text)
        self._length += len(text)
        if start is not None and self._start is None:
            self._start = start
        if end is not None:
            self._end = end

    def flush(self) -> Fragment | None:
        """Return the buffered fragment and reset, or ``None`` when empty."""
        if not self._parts:
            return None
        fragment = Fragment(text="".join(self._parts), start=self._start, end=self._end)
        self.reset()
        return fragment

    def reset(self) -> None:
        self._parts = []
        self._length = 0
        self._start = None
        self._end = None
