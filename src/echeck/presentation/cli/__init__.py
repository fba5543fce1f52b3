"""Command-line interface for echeck."""
