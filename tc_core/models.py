"""Value types shared by the editor core."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SelectOptionColor(str, Enum):
    """Palette used to render option tags."""

    PURPLE = "purple"
    PINK = "pink"
    LIGHT_PINK = "light_pink"
    ORANGE = "orange"
    YELLOW = "yellow"
    LIME = "lime"
    GREEN = "green"
    AQUA = "aqua"
    BLUE = "blue"

    @classmethod
    def for_index(cls, index: int) -> "SelectOptionColor":
        """Cycle through the palette for the ``index``-th created option."""
        palette = list(cls)
        return palette[index % len(palette)]


def normalize_name(name: str) -> str:
    """Return the comparison key used for option name uniqueness."""
    return name.strip().casefold()


class SelectOption(BaseModel):
    """A named, colored tag value that can be attached to a grid cell."""

    id: str = Field(min_length=1)
    name: str
    color: SelectOptionColor = SelectOptionColor.PURPLE

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("id", "name", mode="before")
    @classmethod
    def _coerce_numbers(cls, value: Any) -> Any:
        # Host grids hand out integer ids; YAML reads names like 2024 as numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def key(self) -> str:
        return normalize_name(self.name)


class GridCell(BaseModel):
    """Opaque reference to the host grid cell being edited."""

    grid_id: str = ""
    row_id: str = ""
    field_id: str = ""

    model_config = ConfigDict(frozen=True, extra="allow")

    def describe(self) -> str:
        return f"{self.grid_id}/{self.row_id}/{self.field_id}"


class EditorState(BaseModel):
    """Immutable snapshot handed to the presentation layer after each event.

    ``selected_options`` holds members of ``all_options`` only, in the order
    they were selected.
    """

    all_options: tuple[SelectOption, ...] = ()
    selected_options: tuple[SelectOption, ...] = ()
    pending_text: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def selected_ids(self) -> tuple[str, ...]:
        return tuple(option.id for option in self.selected_options)

    def is_selected(self, option_id: str) -> bool:
        return option_id in self.selected_ids

    def option(self, option_id: str) -> SelectOption | None:
        for option in self.all_options:
            if option.id == option_id:
                return option
        return None

    @property
    def visible_options(self) -> tuple[SelectOption, ...]:
        """Options whose name contains the pending text."""
        needle = normalize_name(self.pending_text)
        if not needle:
            return self.all_options
        return tuple(o for o in self.all_options if needle in o.key)

    @property
    def selected_by_name(self) -> Mapping[str, SelectOption]:
        """Selected options keyed by display name, in selection order."""
        return {option.name: option for option in self.selected_options}
