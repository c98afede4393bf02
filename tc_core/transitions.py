"""Pure transition function of the select-option editor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from tc_common.errors import DuplicateName, TagCellError
from tc_core import events
from tc_core.models import EditorState, SelectOption
from tc_core.option_store import OptionStore, new_option_id
from tc_core.selection_set import SelectionSet

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


@dataclass(frozen=True)
class Transition:
    """Outcome of applying one event."""

    event: events.EditorEvent
    state: EditorState
    changed: bool = False
    error: TagCellError | None = None
    option: SelectOption | None = None

    @property
    def rejected(self) -> bool:
        return self.error is not None


def data_changed(before: EditorState, after: EditorState) -> bool:
    """Whether options or selection differ; pending text does not count."""
    return (
        before.all_options != after.all_options
        or before.selected_options != after.selected_options
    )


def _load(state: EditorState, id_factory: IdFactory) -> tuple[OptionStore, SelectionSet]:
    store = OptionStore(state.all_options, id_factory=id_factory)
    selection = SelectionSet(store, state.selected_ids)
    return store, selection


def _snapshot(
    store: OptionStore, selection: SelectionSet, pending_text: str
) -> EditorState:
    selected = tuple(
        option
        for option in (store.lookup(option_id) for option_id in selection.ordered())
        if option is not None
    )
    return EditorState(
        all_options=store.options(),
        selected_options=selected,
        pending_text=pending_text,
    )


def _initial(event: events.Initial, id_factory: IdFactory) -> EditorState:
    store = OptionStore(event.options, id_factory=id_factory)
    selection = SelectionSet(store, (option.id for option in event.selected))
    dropped = len({o.id for o in event.selected}) - len(selection)
    if dropped:
        logger.warning("Dropped %d selected ids without a backing option", dropped)
    return _snapshot(store, selection, "")


def _new_option(
    state: EditorState, event: events.NewOption, id_factory: IdFactory
) -> Transition:
    if not event.text.strip():
        return Transition(event=event, state=state)
    store, selection = _load(state, id_factory)
    try:
        option = store.add(event.text)
    except DuplicateName as exc:
        option = store.get(exc.context["existing_id"])
        logger.debug("Reusing existing option %s for %r", option.id, event.text)
    selection.select(option.id)
    new_state = _snapshot(store, selection, "")
    return Transition(
        event=event,
        state=new_state,
        changed=data_changed(state, new_state),
        option=option,
    )


def _select_option(
    state: EditorState, event: events.SelectOption, id_factory: IdFactory
) -> Transition:
    store, selection = _load(state, id_factory)
    if event.option_id not in store:
        logger.debug("Ignoring toggle of unknown option %s", event.option_id)
        return Transition(event=event, state=state)
    selection.toggle(event.option_id)
    return Transition(
        event=event,
        state=_snapshot(store, selection, state.pending_text),
        changed=True,
        option=store.lookup(event.option_id),
    )


def _update_option(
    state: EditorState, event: events.UpdateOption, id_factory: IdFactory
) -> Transition:
    store, selection = _load(state, id_factory)
    option = store.update(event.option)
    new_state = _snapshot(store, selection, state.pending_text)
    return Transition(
        event=event, state=new_state, changed=data_changed(state, new_state), option=option
    )


def _delete_option(
    state: EditorState, event: events.DeleteOption, id_factory: IdFactory
) -> Transition:
    store, selection = _load(state, id_factory)
    option = store.remove(event.option.id)
    return Transition(
        event=event,
        state=_snapshot(store, selection, state.pending_text),
        changed=True,
        option=option,
    )


def reduce(
    state: EditorState,
    event: events.EditorEvent,
    *,
    id_factory: IdFactory = new_option_id,
) -> Transition:
    """Apply ``event`` to ``state`` and return the resulting transition.

    Recoverable failures (``DuplicateName`` on rename, ``NotFound``, empty
    names) leave the state untouched and are reported on the transition.
    """
    try:
        if isinstance(event, events.Initial):
            new_state = _initial(event, id_factory)
            return Transition(event=event, state=new_state)
        if isinstance(event, events.NewOption):
            return _new_option(state, event, id_factory)
        if isinstance(event, events.SelectOption):
            return _select_option(state, event, id_factory)
        if isinstance(event, events.UpdateOption):
            return _update_option(state, event, id_factory)
        if isinstance(event, events.DeleteOption):
            return _delete_option(state, event, id_factory)
        if isinstance(event, events.PendingTextChanged):
            new_state = state.model_copy(update={"pending_text": event.text})
            return Transition(event=event, state=new_state)
    except TagCellError as exc:
        logger.info("Rejected %s: %s", type(event).__name__, exc)
        return Transition(event=event, state=state, error=exc)
    raise TypeError(f"Unsupported editor event: {event!r}")
