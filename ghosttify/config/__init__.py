"""Configuration for ghosttify."""
