"""Command line interface for the select-option cell editor."""
