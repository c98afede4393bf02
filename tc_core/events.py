"""Intent events accepted by the editor controller.

Event classes are referenced through the module (``events.SelectOption``) to
keep them apart from the ``models.SelectOption`` record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from tc_core import models


@dataclass(frozen=True)
class Initial:
    """Seed the editor from the host cell."""

    options: tuple[models.SelectOption, ...] = ()
    selected: tuple[models.SelectOption, ...] = ()

    @classmethod
    def from_cell(
        cls,
        options: Iterable[models.SelectOption],
        selected: Iterable[models.SelectOption],
    ) -> "Initial":
        return cls(options=tuple(options), selected=tuple(selected))


@dataclass(frozen=True)
class NewOption:
    """Free text submitted from the text field."""

    text: str


@dataclass(frozen=True)
class SelectOption:
    """Toggle selection of an option (click on a row or tag)."""

    option_id: str


@dataclass(frozen=True)
class UpdateOption:
    """Apply an edited option (name and color) from the edit panel."""

    option: models.SelectOption


@dataclass(frozen=True)
class DeleteOption:
    """Delete an option from the edit panel."""

    option: models.SelectOption


@dataclass(frozen=True)
class PendingTextChanged:
    """Text typed in the field that has not been submitted yet."""

    text: str


EditorEvent = Union[
    Initial,
    NewOption,
    SelectOption,
    UpdateOption,
    DeleteOption,
    PendingTextChanged,
]
