"""Edit panel for a single option."""

from __future__ import annotations

from tc_core.controller import EditorController
from tc_core.models import SelectOption, SelectOptionColor


class OptionEditPanel:
    """Forwards rename, recolor and delete actions on one option as events.

    Edits are built from the option as it is in the current editor state, so
    changes made elsewhere while the panel is open are not reverted.
    """

    def __init__(self, controller: EditorController, option: SelectOption) -> None:
        self._controller = controller
        self.option = option

    def refresh(self) -> SelectOption | None:
        """Reload the option from the editor state; None once it is deleted."""
        current = self._controller.state.option(self.option.id)
        if current is not None:
            self.option = current
        return current

    def on_updated(self, option: SelectOption) -> bool:
        """Apply ``option``; returns False when the edit was rejected."""
        transition = self._controller.update_option(option)
        if transition is None or transition.rejected:
            return False
        self.refresh()
        return True

    def on_deleted(self) -> None:
        self._controller.delete_option(self.option)

    def _edit(self, **changes: object) -> bool:
        current = self.refresh()
        if current is None:
            return False
        return self.on_updated(current.model_copy(update=changes))

    def rename(self, name: str) -> bool:
        return self._edit(name=name)

    def recolor(self, color: SelectOptionColor) -> bool:
        return self._edit(color=color)
