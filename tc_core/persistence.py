"""Persistence gateways receiving committed editor snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml
from pydantic import ValidationError

from tc_common.errors import PersistenceError
from tc_core.models import EditorState, GridCell, SelectOption

logger = logging.getLogger(__name__)


@runtime_checkable
class PersistenceGateway(Protocol):
    """Host-side sink for finalized option lists and selections."""

    def commit(self, cell: GridCell, state: EditorState) -> None:
        ...


@dataclass
class InMemoryGateway:
    """Gateway that records commits, for hosts that poll and for tests."""

    commits: list[tuple[GridCell, EditorState]] = field(default_factory=list)

    def commit(self, cell: GridCell, state: EditorState) -> None:
        self.commits.append((cell, state))

    @property
    def last(self) -> EditorState | None:
        return self.commits[-1][1] if self.commits else None


@dataclass
class CellDocument:
    """Options and selection of one cell as stored in a YAML file."""

    cell: GridCell
    options: list[SelectOption]
    selected: list[SelectOption]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CellDocument":
        try:
            cell = GridCell.model_validate(data.get("cell") or {})
            options = [SelectOption.model_validate(o) for o in data.get("options") or []]
        except ValidationError as exc:
            raise PersistenceError("Invalid cell document", cause=exc) from exc
        by_id = {option.id: option for option in options}
        selected = [
            by_id[str(option_id)]
            for option_id in data.get("selected") or []
            if str(option_id) in by_id
        ]
        return cls(cell=cell, options=options, selected=selected)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cell": self.cell.model_dump(mode="json"),
            "options": [o.model_dump(mode="json") for o in self.options],
            "selected": [o.id for o in self.selected],
        }


def read_cell_document(path: Path) -> CellDocument:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise PersistenceError(
            f"Cannot read cell document {path}", context={"path": path}, cause=exc
        ) from exc
    if not isinstance(raw, dict):
        raise PersistenceError(
            "Cell document must contain a mapping at the top level.",
            context={"path": path},
        )
    return CellDocument.from_dict(raw)


class YamlCellGateway:
    """Writes the committed snapshot back to a YAML cell document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> CellDocument:
        return read_cell_document(self.path)

    def commit(self, cell: GridCell, state: EditorState) -> None:
        document = CellDocument(
            cell=cell,
            options=list(state.all_options),
            selected=list(state.selected_options),
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                yaml.safe_dump(document.to_dict(), sort_keys=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise PersistenceError(
                f"Cannot write cell document {self.path}",
                context={"path": self.path},
                cause=exc,
            ) from exc
        logger.info("Committed cell %s to %s", cell.describe(), self.path)
