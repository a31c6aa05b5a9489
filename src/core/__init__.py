"""Core models, constants, errors, and configuration."""
