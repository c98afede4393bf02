"""Select-option cell editor core."""
