"""Public API surface for tc_core."""

from tc_core import events
from tc_core.controller import EditorController
from tc_core.edit_panel import OptionEditPanel
from tc_core.models import EditorState, GridCell, SelectOption, SelectOptionColor
from tc_core.option_store import OptionStore
from tc_core.persistence import (
    CellDocument,
    InMemoryGateway,
    PersistenceGateway,
    YamlCellGateway,
    read_cell_document,
)
from tc_core.selection_set import SelectionSet
from tc_core.session import EditorOverlay, EditorSession
from tc_core.settings import CommitMode, EditorSettings, load_settings
from tc_core.text_sync import TextInputSync
from tc_core.transitions import Transition, reduce

__all__ = [
    "CellDocument",
    "CommitMode",
    "EditorController",
    "EditorOverlay",
    "EditorSession",
    "EditorSettings",
    "EditorState",
    "events",
    "GridCell",
    "InMemoryGateway",
    "load_settings",
    "OptionEditPanel",
    "OptionStore",
    "PersistenceGateway",
    "read_cell_document",
    "reduce",
    "SelectionSet",
    "SelectOption",
    "SelectOptionColor",
    "TextInputSync",
    "Transition",
    "YamlCellGateway",
]
