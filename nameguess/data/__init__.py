"""Packaged name tables (CSV)."""
