"""Yor - tag-change tracking report."""
