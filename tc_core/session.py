"""Scoped editor sessions and the single-editor overlay."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from tc_core.controller import EditorController
from tc_core.models import EditorState, GridCell, SelectOption
from tc_core.option_store import new_option_id
from tc_core.persistence import PersistenceGateway
from tc_core.settings import CommitMode, EditorSettings
from tc_core.transitions import IdFactory, Transition

logger = logging.getLogger(__name__)

DismissCallback = Callable[[], None]


class EditorSession:
    """One open editor: controller, commit policy and dismissal callback.

    With ``CommitMode.PER_EVENT`` every state-changing event is committed to
    the gateway; with ``CommitMode.ON_CLOSE`` the final snapshot is committed
    once on close, and only if something changed. The dismissal callback runs
    exactly once.
    """

    def __init__(
        self,
        cell: GridCell,
        options: Iterable[SelectOption],
        selected_options: Iterable[SelectOption],
        *,
        gateway: PersistenceGateway,
        on_dismissed: DismissCallback | None = None,
        settings: EditorSettings | None = None,
        id_factory: IdFactory = new_option_id,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.controller = EditorController(
            cell, options, selected_options, id_factory=id_factory
        )
        self._gateway = gateway
        self._on_dismissed = on_dismissed
        self._dirty = False
        self._closed = False
        self.controller.on_transition(self._handle_transition)

    @property
    def cell(self) -> GridCell:
        return self.controller.cell

    @property
    def state(self) -> EditorState:
        return self.controller.state

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def closed(self) -> bool:
        return self._closed

    def _handle_transition(self, transition: Transition) -> None:
        if not transition.changed:
            return
        self._dirty = True
        if self.settings.commit_mode is CommitMode.PER_EVENT:
            self._commit(transition.state)

    def _commit(self, state: EditorState) -> None:
        try:
            self._gateway.commit(self.cell, state)
        except Exception:
            logger.exception("Persisting cell %s failed", self.cell.describe())

    def close(self) -> EditorState:
        """Close the editor, committing per the configured mode."""
        if self._closed:
            return self.controller.state
        self._closed = True
        final = self.controller.close()
        if self.settings.commit_mode is CommitMode.ON_CLOSE and self._dirty:
            self._commit(final)
        logger.debug("Closed editor for cell %s (dirty=%s)", self.cell.describe(), self._dirty)
        if self._on_dismissed is not None:
            try:
                self._on_dismissed()
            except Exception:
                logger.exception("Dismissal callback failed")
        return final


class EditorOverlay:
    """Keeps at most one open editor session per overlay identifier."""

    def __init__(
        self,
        gateway: PersistenceGateway,
        settings: EditorSettings | None = None,
    ) -> None:
        self._gateway = gateway
        self._settings = settings or EditorSettings()
        self._sessions: dict[str, EditorSession] = {}

    def show(
        self,
        cell: GridCell,
        options: Iterable[SelectOption],
        selected_options: Iterable[SelectOption],
        on_dismissed: DismissCallback | None = None,
        *,
        identifier: str = "select-option-editor",
    ) -> EditorSession:
        """Open an editor, closing any editor already shown under ``identifier``."""
        self.remove(identifier)
        session = EditorSession(
            cell,
            options,
            selected_options,
            gateway=self._gateway,
            on_dismissed=on_dismissed,
            settings=self._settings,
        )
        self._sessions[identifier] = session
        return session

    def remove(self, identifier: str = "select-option-editor") -> EditorState | None:
        session = self._sessions.pop(identifier, None)
        if session is None:
            return None
        return session.close()

    def get(self, identifier: str = "select-option-editor") -> EditorSession | None:
        return self._sessions.get(identifier)

    def close_all(self) -> None:
        for identifier in list(self._sessions):
            self.remove(identifier)
