"""Custom errors raised by the command registry."""

from __future__ import annotations


class CommandRegistryError(Exception):
    """Base class for command registry errors."""


class CommandCollisionError(CommandRegistryError):
    """Raised when an entry already exists for a name."""


class CommandNotFoundError(CommandRegistryError):
    """Raised when a command cannot be resolved."""
