"""Bundled data files (default settings and their schema)."""
