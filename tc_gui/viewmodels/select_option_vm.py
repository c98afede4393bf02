"""ViewModel for the select-option cell editor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from PySide6.QtCore import QObject, QTimer, Signal

from tc_common.errors import TagCellError
from tc_core.edit_panel import OptionEditPanel
from tc_core.models import EditorState, SelectOption
from tc_core.text_sync import TextInputSync

if TYPE_CHECKING:
    from tc_core.session import EditorSession


class SelectOptionEditorViewModel(QObject):
    """ViewModel wrapping one editor session.

    Views render ``option_rows`` and ``tags`` and forward user intents to the
    methods below; every new snapshot is re-emitted as ``state_changed``.
    """

    # Signals
    state_changed = Signal(object)  # EditorState
    tags_changed = Signal(list)  # selected option names
    error_occurred = Signal(str)
    edit_panel_opened = Signal(object)  # OptionEditPanel
    dismissed = Signal()

    def __init__(
        self,
        session: "EditorSession",
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._controller = session.controller
        self._text_sync = TextInputSync(self._controller)
        self._edit_panel: OptionEditPanel | None = None
        self._pending_text = ""
        self._closed = False

        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(session.settings.debounce_ms)
        self._debounce.timeout.connect(self.flush_pending_text)

        self._unsubscribe_state = self._controller.subscribe(self._on_state)
        self._unsubscribe_errors = self._controller.on_error(self._on_error)

    @property
    def state(self) -> EditorState:
        """Current editor snapshot."""
        return self._controller.state

    @property
    def tags(self) -> list[str]:
        """Tag names shown inside the text field."""
        return list(self._text_sync.tags)

    @property
    def edit_panel(self) -> OptionEditPanel | None:
        return self._edit_panel

    @property
    def is_open(self) -> bool:
        return not self._closed

    def option_rows(self) -> list[dict[str, Any]]:
        """Rows for the option list, filtered by the typed text."""
        state = self.state
        return [
            {
                "id": option.id,
                "name": option.name,
                "color": option.color.value,
                "selected": state.is_selected(option.id),
            }
            for option in state.visible_options
        ]

    def _on_state(self, state: EditorState) -> None:
        if self._edit_panel is not None and self._edit_panel.refresh() is None:
            self._edit_panel = None
        self.state_changed.emit(state)
        self.tags_changed.emit(list(self._text_sync.tags))

    def _on_error(self, error: TagCellError) -> None:
        self.error_occurred.emit(str(error))

    def text_changed(self, text: str) -> None:
        """Record typed text; forwarded after the debounce interval."""
        self._pending_text = text
        if self._debounce.interval() <= 0:
            self.flush_pending_text()
            return
        self._debounce.start()

    def flush_pending_text(self) -> None:
        self._debounce.stop()
        if self._pending_text != self.state.pending_text:
            self._text_sync.text_changed(self._pending_text)

    def submit_text(self, text: str) -> None:
        """Create (or reuse) an option from the text field."""
        self._debounce.stop()
        self._pending_text = ""
        self._text_sync.submit(text)

    def remove_tag(self, name: str) -> None:
        self._text_sync.remove_tag(name)

    def toggle_option(self, option_id: str) -> None:
        self._controller.select_option(option_id)

    def open_edit_panel(self, option_id: str) -> OptionEditPanel | None:
        """Open the edit panel for one option, replacing any open panel."""
        option = self.state.option(option_id)
        if option is None:
            self.error_occurred.emit(f"Option {option_id} no longer exists")
            return None
        self._edit_panel = OptionEditPanel(self._controller, option)
        self.edit_panel_opened.emit(self._edit_panel)
        return self._edit_panel

    def update_option(self, option: SelectOption) -> None:
        self._controller.update_option(option)

    def delete_option(self, option: SelectOption) -> None:
        if self._edit_panel is not None and self._edit_panel.option.id == option.id:
            self._edit_panel = None
        self._controller.delete_option(option)

    def close(self) -> None:
        """Dismiss the editor; commits according to the session settings."""
        if self._closed:
            return
        self._closed = True
        self._debounce.stop()
        self._text_sync.detach()
        self._unsubscribe_state()
        self._unsubscribe_errors()
        self._edit_panel = None
        if not self._session.closed:
            self._session.close()
        self.dismissed.emit()
