"""Lazily loaded dogwatch commands."""
