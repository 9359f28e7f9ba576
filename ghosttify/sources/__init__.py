"""Shortcut sources."""
