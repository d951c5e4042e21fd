"""Command line interface for recordflow."""
