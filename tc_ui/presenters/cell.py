"""Presenter for select-option cells."""

from __future__ import annotations

from tc_core.models import EditorState, GridCell
from tc_ui.models import TableModel


def build_cell_table(cell: GridCell, state: EditorState) -> TableModel:
    """Transform an editor snapshot into a TableModel, one row per option."""
    order = {option_id: index for index, option_id in enumerate(state.selected_ids, 1)}
    rows = [
        [
            option.id,
            option.name,
            option.color.value,
            str(order[option.id]) if option.id in order else "",
        ]
        for option in state.all_options
    ]
    return TableModel(
        title=f"Cell {cell.describe()}",
        columns=["ID", "Name", "Color", "Selected"],
        rows=rows,
    )
