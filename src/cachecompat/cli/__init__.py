"""Command-line interface for cachecompat.

Provides commands for checking and inspecting test input files.
"""

from .main import cli, main

__all__ = ["cli", "main"]
