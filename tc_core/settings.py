"""Editor configuration."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tc_common.config.env import parse_choice_env, parse_int_env
from tc_common.errors import ConfigurationError


class CommitMode(str, Enum):
    """When edits become visible to other readers of the host grid."""

    PER_EVENT = "per_event"
    ON_CLOSE = "on_close"


class EditorSettings(BaseModel):
    """Settings for one editor session."""

    commit_mode: CommitMode = Field(
        default=CommitMode.PER_EVENT,
        description="Commit after every change or once when the editor closes",
    )
    debounce_ms: int = Field(
        default=150,
        ge=0,
        description="Delay before typed text is forwarded as a pending-text event",
    )

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EditorSettings":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid editor settings", context={"errors": exc.errors()}, cause=exc
            ) from exc

    def with_env_overrides(self, environ: Mapping[str, str] | None = None) -> "EditorSettings":
        """Apply ``TC_COMMIT_MODE`` and ``TC_DEBOUNCE_MS`` when set."""
        env = os.environ if environ is None else environ
        updates: dict[str, Any] = {}
        mode = parse_choice_env(
            env.get("TC_COMMIT_MODE"), {mode.value for mode in CommitMode}
        )
        if mode is not None:
            updates["commit_mode"] = CommitMode(mode)
        debounce = parse_int_env(env.get("TC_DEBOUNCE_MS"))
        if debounce is not None and debounce >= 0:
            updates["debounce_ms"] = debounce
        return self.model_copy(update=updates) if updates else self


def load_settings(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> EditorSettings:
    """Load settings from a YAML file (``editor`` section or top level)."""
    data: dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}", context={"path": path}
            )
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Cannot parse {path}", context={"path": path}, cause=exc
            ) from exc
        if not isinstance(raw, dict):
            raise ConfigurationError("Config file must contain a mapping at the top level.")
        section = raw.get("editor", raw)
        if not isinstance(section, dict):
            raise ConfigurationError("Config section 'editor' must be a mapping.")
        data = section
    return EditorSettings.from_mapping(data).with_env_overrides(environ)
