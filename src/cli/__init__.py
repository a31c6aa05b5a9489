"""Command-line interface for Baiwen."""
