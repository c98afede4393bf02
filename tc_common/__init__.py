"""Shared helpers for tagcell-editor."""

from tc_common.api import TagCellError, configure_logging

__all__ = ["configure_logging", "TagCellError"]
