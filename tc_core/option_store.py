"""Authoritative option records for one cell."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Callable, Iterable, Iterator

from tc_common.errors import DuplicateName, InvalidOptionName, NotFound
from tc_core.models import SelectOption, SelectOptionColor, normalize_name

if TYPE_CHECKING:
    from tc_core.selection_set import SelectionSet

logger = logging.getLogger(__name__)


def new_option_id() -> str:
    return uuid.uuid4().hex


class OptionStore:
    """Ordered mapping of option id to option record.

    Names are unique case-insensitively after trimming. Removing an option
    cascades into every attached SelectionSet.
    """

    def __init__(
        self,
        options: Iterable[SelectOption] = (),
        *,
        id_factory: Callable[[], str] = new_option_id,
    ) -> None:
        self._options: dict[str, SelectOption] = {}
        self._ids_by_key: dict[str, str] = {}
        self._id_factory = id_factory
        self._selections: list["SelectionSet"] = []
        for option in options:
            self._seed(option)

    def _seed(self, option: SelectOption) -> None:
        if option.id in self._options:
            logger.warning("Skipping option with duplicate id %s", option.id)
            return
        if self.find_by_name(option.name) is not None:
            logger.warning("Skipping option with duplicate name %r", option.name)
            return
        self._store(option)

    def _store(self, option: SelectOption) -> None:
        previous = self._options.get(option.id)
        if previous is not None:
            del self._ids_by_key[previous.key]
        self._options[option.id] = option
        self._ids_by_key[option.key] = option.id

    def attach(self, selection: "SelectionSet") -> None:
        """Register a selection so removals cascade into it."""
        if selection not in self._selections:
            self._selections.append(selection)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[SelectOption]:
        return iter(self._options.values())

    def __contains__(self, option_id: object) -> bool:
        return option_id in self._options

    def options(self) -> tuple[SelectOption, ...]:
        return tuple(self._options.values())

    def lookup(self, option_id: str) -> SelectOption | None:
        return self._options.get(option_id)

    def find_by_name(self, name: str) -> SelectOption | None:
        option_id = self._ids_by_key.get(normalize_name(name))
        return None if option_id is None else self._options[option_id]

    def get(self, option_id: str) -> SelectOption:
        """Like lookup, but raises NotFound for unknown ids."""
        option = self._options.get(option_id)
        if option is None:
            raise NotFound(
                f"Option {option_id!r} does not exist",
                context={"option_id": option_id},
            )
        return option

    def _check_name(self, name: str, *, exclude_id: str | None = None) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise InvalidOptionName("Option name must not be empty")
        existing = self.find_by_name(cleaned)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateName(
                f"An option named {existing.name!r} already exists",
                context={"name": cleaned, "existing_id": existing.id},
            )
        return cleaned

    def add(self, name: str, color: SelectOptionColor | None = None) -> SelectOption:
        """Create an option at the end of the list."""
        cleaned = self._check_name(name)
        option_id = self._id_factory()
        while option_id in self._options:
            option_id = self._id_factory()
        option = SelectOption(
            id=option_id,
            name=cleaned,
            color=color or SelectOptionColor.for_index(len(self._options)),
        )
        self._store(option)
        logger.debug("Added option %s (%s)", option.id, option.name)
        return option

    def update(self, option: SelectOption) -> SelectOption:
        """Apply name and color of ``option`` to the stored record in place."""
        current = self.get(option.id)
        cleaned = self._check_name(option.name, exclude_id=option.id)
        updated = current.model_copy(update={"name": cleaned, "color": option.color})
        self._store(updated)
        return updated

    def rename(self, option_id: str, new_name: str) -> SelectOption:
        current = self.get(option_id)
        return self.update(current.model_copy(update={"name": new_name}))

    def remove(self, option_id: str) -> SelectOption:
        """Delete an option and drop it from every attached selection."""
        option = self.get(option_id)
        del self._options[option_id]
        del self._ids_by_key[option.key]
        for selection in self._selections:
            selection.remove_if_present(option_id)
        logger.debug("Removed option %s (%s)", option.id, option.name)
        return option
