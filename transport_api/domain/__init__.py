"""Pure domain helpers (record builders, sample data)."""
