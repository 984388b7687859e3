"""Helper utilities for registering the built-in xrm commands."""

from __future__ import annotations

from typing import Sequence

from xrm_core.commands import CommandEntry, CommandRegistry

from .commands import (
    AddCommand,
    CurrentCommand,
    DelCommand,
    HelpCommand,
    LsCommand,
    PingCommand,
    UseCommand,
)

__all__ = ["register_builtin_commands"]

_BUILTIN_COMMANDS: Sequence[type] = (
    LsCommand,
    UseCommand,
    AddCommand,
    DelCommand,
    CurrentCommand,
    PingCommand,
    HelpCommand,
)


def register_builtin_commands(registry: CommandRegistry) -> None:
    """Register the built-in xrm command classes with the supplied registry."""

    for command in _BUILTIN_COMMANDS:
        metadata = getattr(command, "__xrm_command__", None)
        if metadata is None:
            continue
        registry.register(CommandEntry(name=str(metadata["name"]), target=command))
