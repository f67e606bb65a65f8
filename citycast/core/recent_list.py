"""
Most-recently-used list of searched cities.

Entries compare case-insensitively, the newest search sits at the front, and
the list never grows past its capacity.
"""

from typing import Iterator

from citycast.config import RECENT_LIMIT


class RecentList:
    """Bounded, case-insensitively deduplicated list of city names."""

    def __init__(self, capacity: int = RECENT_LIMIT) -> None:
        self.capacity = capacity
        self._cities: list[str] = []

    def add(self, city: str) -> None:
        """
        Move ``city`` to the front, dropping any entry with the same name.

        Blank names are ignored. The list is truncated to ``capacity`` after
        the insert, so the oldest entry falls off.

        :param city: City name as it should be displayed
        """
        trimmed = city.strip()
        if not trimmed:
            return
        key = trimmed.casefold()
        rest = [c for c in self._cities if c.casefold() != key]
        self._cities = [trimmed, *rest][: self.capacity]

    def remove(self, city: str) -> None:
        """Drop the entry matching ``city``, ignoring case. No-op if absent."""
        key = city.strip().casefold()
        self._cities = [c for c in self._cities if c.casefold() != key]

    def snapshot(self) -> tuple[str, ...]:
        """Current entries, most recent first."""
        return tuple(self._cities)

    def __contains__(self, city: object) -> bool:
        if not isinstance(city, str):
            return False
        key = city.strip().casefold()
        return any(c.casefold() == key for c in self._cities)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._cities)

    def __repr__(self) -> str:
        return f"RecentList({list(self._cities)!r})"
