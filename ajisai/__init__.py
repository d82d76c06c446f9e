"""Workspace configuration handling and agent bridges for AI agent presets."""

__version__ = "0.1.0"