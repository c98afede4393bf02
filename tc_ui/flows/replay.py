"""Replay scripted user intents against an editor session."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tc_common.errors import ConfigurationError
from tc_core import events
from tc_core.models import EditorState, SelectOption
from tc_core.session import EditorSession

logger = logging.getLogger(__name__)

_KINDS = ("new", "select", "update", "delete", "text")


def _lookup(state: EditorState, option_id: Any) -> SelectOption:
    option = state.option(str(option_id))
    # Unknown ids still become events so the editor handles them as no-ops.
    return option or SelectOption(id=str(option_id), name="")


def _to_event(entry: Any, state: EditorState) -> events.EditorEvent:
    if not isinstance(entry, dict) or len(entry) != 1:
        raise ConfigurationError(
            "Each script entry must be a mapping with a single key",
            context={"entry": entry},
        )
    kind, value = next(iter(entry.items()))
    if kind == "new":
        return events.NewOption(str(value))
    if kind == "select":
        return events.SelectOption(str(value))
    if kind == "text":
        return events.PendingTextChanged(str(value or ""))
    if kind == "delete":
        return events.DeleteOption(_lookup(state, value))
    if kind == "update":
        if not isinstance(value, dict) or "id" not in value:
            raise ConfigurationError("'update' needs a mapping with an 'id'")
        current = _lookup(state, value["id"])
        try:
            option = SelectOption.model_validate({**current.model_dump(), **value})
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid option in 'update'", context={"entry": value}, cause=exc
            ) from exc
        return events.UpdateOption(option)
    raise ConfigurationError(
        f"Unknown script entry {kind!r}; expected one of {', '.join(_KINDS)}",
        context={"entry": entry},
    )


def load_script(path: Path) -> list[Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Cannot read script {path}", cause=exc) from exc
    if not isinstance(data, list):
        raise ConfigurationError("Event script must be a list of entries")
    return data


def replay(session: EditorSession, entries: list[Any]) -> list[str]:
    """Dispatch every entry in order; returns messages of rejected events.

    Entries are converted against the state reached so far, so a script can
    update an option created by an earlier entry.
    """
    rejected: list[str] = []
    for entry in entries:
        event = _to_event(entry, session.state)
        transition = session.controller.dispatch(event)
        if transition is not None and transition.error is not None:
            logger.warning("Script entry %s rejected: %s", entry, transition.error)
            rejected.append(f"{type(event).__name__}: {transition.error}")
    return rejected
