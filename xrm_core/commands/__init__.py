"""Convenience exports for the command registry."""

from .entry import CommandEntry
from .errors import CommandCollisionError, CommandNotFoundError, CommandRegistryError
from .registry import CommandRegistry

__all__ = [
    "CommandEntry",
    "CommandRegistry",
    "CommandRegistryError",
    "CommandCollisionError",
    "CommandNotFoundError",
]
