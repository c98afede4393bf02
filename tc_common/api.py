"""Public API surface for tc_common."""

from tc_common.config.env import parse_bool_env, parse_choice_env, parse_int_env
from tc_common.errors import (
    ConfigurationError,
    DuplicateName,
    InvalidOptionName,
    NotFound,
    PersistenceError,
    TagCellError,
    error_to_payload,
)
from tc_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "DuplicateName",
    "error_to_payload",
    "InvalidOptionName",
    "NotFound",
    "parse_bool_env",
    "parse_choice_env",
    "parse_int_env",
    "PersistenceError",
    "TagCellError",
]
