"""Tests for editor sessions, commit modes and the overlay."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tc_core.models import GridCell, SelectOption
from tc_core.persistence import InMemoryGateway
from tc_core.session import EditorOverlay, EditorSession
from tc_core.settings import CommitMode, EditorSettings


pytestmark = pytest.mark.unit_core

CELL = GridCell(grid_id="g1", row_id="r1", field_id="tags")
RED = SelectOption(id="1", name="Red")


def _session(mode: CommitMode, gateway, on_dismissed=None) -> EditorSession:
    return EditorSession(
        CELL,
        [RED],
        [],
        gateway=gateway,
        on_dismissed=on_dismissed,
        settings=EditorSettings(commit_mode=mode),
    )


def test_per_event_commits_every_change() -> None:
    gateway = InMemoryGateway()
    session = _session(CommitMode.PER_EVENT, gateway)

    session.controller.new_option("Blue")
    session.controller.set_pending_text("x")
    session.controller.select_option("1")
    session.close()

    assert len(gateway.commits) == 2
    cell, state = gateway.commits[-1]
    assert cell == CELL
    assert [o.name for o in state.selected_options] == ["Blue", "Red"]


def test_on_close_commits_once_at_close() -> None:
    gateway = InMemoryGateway()
    session = _session(CommitMode.ON_CLOSE, gateway)

    session.controller.new_option("Blue")
    session.controller.select_option("1")
    assert gateway.commits == []

    final = session.close()

    assert gateway.commits == [(CELL, final)]


def test_on_close_without_changes_does_not_commit() -> None:
    gateway = InMemoryGateway()
    session = _session(CommitMode.ON_CLOSE, gateway)
    session.controller.set_pending_text("abandoned")
    session.close()
    assert gateway.commits == []
    assert session.dirty is False


def test_dismissal_callback_runs_exactly_once() -> None:
    on_dismissed = MagicMock()
    session = _session(CommitMode.PER_EVENT, InMemoryGateway(), on_dismissed)

    session.close()
    session.close()

    on_dismissed.assert_called_once_with()
    assert session.closed is True


def test_gateway_failure_is_logged_not_raised(caplog) -> None:
    gateway = MagicMock()
    gateway.commit.side_effect = OSError("disk full")
    session = _session(CommitMode.PER_EVENT, gateway)

    transition = session.controller.new_option("Blue")

    assert transition is not None and transition.changed
    assert "Persisting cell" in caplog.text
    assert [o.name for o in session.state.all_options] == ["Red", "Blue"]


def test_overlay_replaces_open_editor() -> None:
    gateway = InMemoryGateway()
    overlay = EditorOverlay(gateway, EditorSettings(commit_mode=CommitMode.ON_CLOSE))
    first_dismissed = MagicMock()

    first = overlay.show(CELL, [RED], [], first_dismissed)
    first.controller.select_option("1")
    second = overlay.show(CELL, [RED], [], MagicMock())

    first_dismissed.assert_called_once_with()
    assert first.closed is True
    assert overlay.get() is second
    assert len(gateway.commits) == 1


def test_overlay_remove_closes_and_forgets() -> None:
    overlay = EditorOverlay(InMemoryGateway())
    on_dismissed = MagicMock()
    overlay.show(CELL, [RED], [RED], on_dismissed, identifier="cell-a")

    final = overlay.remove("cell-a")

    assert final is not None and final.selected_ids == ("1",)
    assert overlay.remove("cell-a") is None
    on_dismissed.assert_called_once_with()


def test_overlay_close_all() -> None:
    overlay = EditorOverlay(InMemoryGateway())
    a = overlay.show(CELL, [RED], [], identifier="a")
    b = overlay.show(CELL, [RED], [], identifier="b")
    overlay.close_all()
    assert a.closed and b.closed
