from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator

from .core import NO_SLOT


@dataclass
class MembershipEntry:
    slot: int = NO_SLOT
    on_open: bool = False
    on_closed: bool = False


class MembershipIndex:
    """Per-search record of which states were seen and where they live.

    Keys are states for the generic engine and integer indices for the
    cached and grid engines. Integer keys may be negative or sparse.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, MembershipEntry] = {}

    def entry(self, key: Hashable) -> MembershipEntry:
        e = self._entries.get(key)
        if e is None:
            e = MembershipEntry()
            self._entries[key] = e
        return e

    def get(self, key: Hashable) -> MembershipEntry | None:
        return self._entries.get(key)

    def is_closed(self, key: Hashable) -> bool:
        e = self._entries.get(key)
        return e is not None and e.on_closed

    def is_open(self, key: Hashable) -> bool:
        e = self._entries.get(key)
        return e is not None and e.on_open

    def mark_open(self, key: Hashable, slot: int) -> None:
        e = self.entry(key)
        e.slot = int(slot)
        e.on_open = True

    def mark_closed(self, key: Hashable) -> None:
        e = self.entry(key)
        e.on_open = False
        e.on_closed = True

    def open_keys(self) -> Iterator[Hashable]:
        return (k for k, e in self._entries.items() if e.on_open)

    def closed_keys(self) -> Iterator[Hashable]:
        return (k for k, e in self._entries.items() if e.on_closed)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
