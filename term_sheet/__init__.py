"""Core package for the court term-sheet extraction service."""

__all__ = [
    "config",
    "models",
    "patterns",
    "scanner",
    "layout",
    "metadata",
    "strategies",
    "arbitrator",
    "formatting",
    "pipeline",
    "cli",
    "app",
]
