"""Adapter between the always-open text field and the controller."""

from __future__ import annotations

from tc_core.controller import EditorController
from tc_core.models import EditorState


class TextInputSync:
    """Translate text field activity into intents and mirror selected tags."""

    def __init__(self, controller: EditorController) -> None:
        self._controller = controller
        self._tags: tuple[str, ...] = ()
        self._text = ""
        self._sync(controller.state)
        self._unsubscribe = controller.subscribe(self._sync)

    @property
    def tags(self) -> tuple[str, ...]:
        """Names of selected options, earliest-selected first."""
        return self._tags

    @property
    def text(self) -> str:
        return self._text

    def _sync(self, state: EditorState) -> None:
        self._tags = tuple(option.name for option in state.selected_options)
        self._text = state.pending_text

    def text_changed(self, text: str) -> None:
        self._controller.set_pending_text(text)

    def submit(self, text: str) -> bool:
        """Create or reuse an option from ``text``; blank input is ignored."""
        if not text.strip():
            return False
        self._controller.new_option(text)
        return True

    def remove_tag(self, name: str) -> bool:
        """Deselect the option shown as tag ``name``."""
        option = self._controller.state.selected_by_name.get(name)
        if option is None:
            return False
        self._controller.select_option(option.id)
        return True

    def detach(self) -> None:
        self._unsubscribe()
