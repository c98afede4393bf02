"""Qt presentation layer for the select-option cell editor."""
