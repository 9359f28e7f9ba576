"""Utility modules for ghosttify.

- cli: error handling decorator for typer commands
- logging: logger configuration for the CLI
- output: shared rich console and listing helpers
"""
