from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

SAMPLE_CAPITALS: dict[str, str] = {
    "Arkansas": "Little Rock",
    "Texas": "Austin",
    "Idaho": "Salem",
}


class CapitalStore:
    """Read-only store mapping state names to their capitals.

    Keys are matched exactly (no case folding). The entries are copied on
    construction and exposed through a read-only proxy, so nothing handed
    out by the store can be used to change it.
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def lookup(self, state: str) -> Optional[str]:
        """Return the capital for ``state`` or ``None`` when it is not stored."""
        return self._entries.get(state)

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def __contains__(self, state: object) -> bool:
        return state in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def default_store() -> CapitalStore:
    return CapitalStore(SAMPLE_CAPITALS)
