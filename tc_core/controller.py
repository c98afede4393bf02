"""Single-consumer event loop driving the select-option editor."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable

from tc_common.errors import TagCellError
from tc_core import events
from tc_core.models import EditorState, GridCell, SelectOption
from tc_core.option_store import new_option_id
from tc_core.transitions import IdFactory, Transition, reduce

logger = logging.getLogger(__name__)

StateListener = Callable[[EditorState], None]
ErrorListener = Callable[[TagCellError], None]
TransitionListener = Callable[[Transition], None]


class EditorController:
    """Owns the editor state for one open cell editor.

    Events are queued and processed one at a time on the dispatching thread.
    Events dispatched by listeners while a previous event is being handled are
    appended to the queue and processed after it, so transitions never
    interleave.
    """

    def __init__(
        self,
        cell: GridCell,
        options: Iterable[SelectOption] = (),
        selected_options: Iterable[SelectOption] = (),
        *,
        id_factory: IdFactory = new_option_id,
    ) -> None:
        self.cell = cell
        self._id_factory = id_factory
        self._state = EditorState()
        self._queue: deque[events.EditorEvent] = deque()
        self._draining = False
        self._closed = False
        self._state_listeners: list[StateListener] = []
        self._error_listeners: list[ErrorListener] = []
        self._transition_listeners: list[TransitionListener] = []
        self.dispatch(events.Initial.from_cell(options, selected_options))

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a snapshot listener; returns a callable that unsubscribes."""
        self._state_listeners.append(listener)
        return lambda: self._discard(self._state_listeners, listener)

    def on_error(self, listener: ErrorListener) -> Callable[[], None]:
        """Register a listener for events rejected with a TagCellError."""
        self._error_listeners.append(listener)
        return lambda: self._discard(self._error_listeners, listener)

    def on_transition(self, listener: TransitionListener) -> Callable[[], None]:
        """Register a listener receiving every processed transition."""
        self._transition_listeners.append(listener)
        return lambda: self._discard(self._transition_listeners, listener)

    @staticmethod
    def _discard(listeners: list, listener: object) -> None:
        if listener in listeners:
            listeners.remove(listener)

    # Intent helpers used by the presentation layer.

    def new_option(self, text: str) -> Transition | None:
        return self.dispatch(events.NewOption(text))

    def select_option(self, option_id: str) -> Transition | None:
        return self.dispatch(events.SelectOption(option_id))

    def update_option(self, option: SelectOption) -> Transition | None:
        return self.dispatch(events.UpdateOption(option))

    def delete_option(self, option: SelectOption) -> Transition | None:
        return self.dispatch(events.DeleteOption(option))

    def set_pending_text(self, text: str) -> Transition | None:
        return self.dispatch(events.PendingTextChanged(text))

    def dispatch(self, event: events.EditorEvent) -> Transition | None:
        """Queue ``event`` and drain the queue.

        Returns the transition produced for ``event`` when it was processed
        synchronously, or None when it was queued behind a running drain or
        the controller is closed.
        """
        if self._closed:
            logger.debug("Dropping %s on closed editor", type(event).__name__)
            return None
        self._queue.append(event)
        if self._draining:
            return None
        result: Transition | None = None
        self._draining = True
        try:
            while self._queue:
                queued = self._queue.popleft()
                transition = self._process(queued)
                if queued is event:
                    result = transition
        finally:
            self._draining = False
        return result

    def _process(self, event: events.EditorEvent) -> Transition:
        previous = self._state
        transition = reduce(previous, event, id_factory=self._id_factory)
        self._state = transition.state
        logger.debug(
            "Processed %s (changed=%s, rejected=%s)",
            type(event).__name__,
            transition.changed,
            transition.rejected,
        )
        if transition.error is not None:
            self._notify(self._error_listeners, transition.error)
        if transition.state != previous:
            self._notify(self._state_listeners, transition.state)
        self._notify(self._transition_listeners, transition)
        return transition

    @staticmethod
    def _notify(listeners: list, payload: object) -> None:
        for listener in list(listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Editor listener %r failed", listener)

    def close(self) -> EditorState:
        """Stop accepting events and return the final snapshot."""
        self._closed = True
        self._queue.clear()
        self._state_listeners.clear()
        self._error_listeners.clear()
        self._transition_listeners.clear()
        return self._state
