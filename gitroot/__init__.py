"""Locate the top-level directory of the current git repository."""
