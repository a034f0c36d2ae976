"""Command line interface for config-selector."""
