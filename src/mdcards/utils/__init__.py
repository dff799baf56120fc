"""Shared utilities (logging, file I/O)."""
