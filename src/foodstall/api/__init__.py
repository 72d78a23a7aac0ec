"""API routing."""
