"""Shared helpers: logging, parsing, config files, paths."""
