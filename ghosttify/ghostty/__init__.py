"""Ghostty configuration tree: reading, resolving and merging."""
