"""Sequential task id source."""

from __future__ import annotations


class IdGenerator:
    """Hands out strictly increasing integer ids, starting at ``start + 1``.

    One instance must be shared by every factory that feeds a given
    repository. Two independent generators will issue the same ids.
    """

    def __init__(self, start: int = 0) -> None:
        self._last = start

    @property
    def last(self) -> int:
        return self._last

    def next(self) -> int:
        self._last += 1
        return self._last
