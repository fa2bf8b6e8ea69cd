"""Command-line interface for the fundeps project."""
