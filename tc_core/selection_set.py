"""Ordered selection of option ids for one cell."""

from __future__ import annotations

from typing import Iterable, Iterator

from tc_core.option_store import OptionStore


class SelectionSet:
    """Insertion-ordered set of selected option ids.

    Every member resolves in the backing store; the store prunes members it
    removes.
    """

    def __init__(self, store: OptionStore, selected: Iterable[str] = ()) -> None:
        self._store = store
        self._ids: dict[str, None] = {}
        store.attach(self)
        for option_id in selected:
            self.select(option_id)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def contains(self, option_id: str) -> bool:
        return option_id in self._ids

    __contains__ = contains

    def ordered(self) -> tuple[str, ...]:
        """Selected ids, earliest-selected first."""
        return tuple(self._ids)

    def select(self, option_id: str) -> bool:
        """Append ``option_id`` unless already selected or unknown."""
        if option_id in self._ids:
            return True
        if option_id not in self._store:
            return False
        self._ids[option_id] = None
        return True

    def toggle(self, option_id: str) -> bool:
        """Flip membership; unknown ids are ignored. Returns the new membership."""
        if option_id in self._ids:
            del self._ids[option_id]
            return False
        return self.select(option_id)

    def remove_if_present(self, option_id: str) -> None:
        self._ids.pop(option_id, None)
