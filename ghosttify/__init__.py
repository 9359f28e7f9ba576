"""
ghosttify - carry GNOME Terminal keyboard shortcuts over to Ghostty
"""

__version__ = "0.3.0"
