"""CLI commands for ghosttify."""
