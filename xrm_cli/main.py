"""xrm CLI entrypoint backed by the command registry."""

from __future__ import annotations

import argparse
import inspect
import logging
import sys
from pathlib import Path
from typing import Sequence

from xrm_core.app import XrmApp
from xrm_core.builtins.commands import print_overview
from xrm_core.commands import CommandEntry, CommandNotFoundError
from xrm_core.errors import WriteFailureError
from xrm_core.settings import SettingsResolver

CLI_VERSION = "0.1.0"

_VERBOSE_FLAGS = ("-v", "--verbose")


def main(
    argv: Sequence[str] | None = None,
    *,
    start_dir: Path | str | None = None,
    resolver: SettingsResolver | None = None,
) -> int:
    """Resolve and run an xrm command."""

    tokens = list(argv) if argv is not None else list(sys.argv[1:])
    verbose = any(token in _VERBOSE_FLAGS for token in tokens)
    tokens = [token for token in tokens if token not in _VERBOSE_FLAGS]

    if "--version" in tokens:
        print(f"xrm v{CLI_VERSION}")
        return 0

    app = XrmApp(start_dir=start_dir, resolver=resolver)
    _configure_logging(app.settings.log_level, verbose=verbose)
    try:
        app.bootstrap()
    except WriteFailureError as exc:
        print(f"[xrm] error: {exc}", file=sys.stderr)
        return 2

    if not tokens or tokens[0] in ("-h", "--help"):
        print_overview(app.commands.entries())
        return 0

    name, *command_args = tokens
    try:
        entry = app.commands.resolve(name)
    except CommandNotFoundError as exc:
        print(str(exc))
        print("Run `xrm help` to list the available commands.")
        return 1

    parser = argparse.ArgumentParser(
        prog=f"xrm {entry.name}",
        description=_command_description(entry),
    )
    entry.target.configure(parser)

    try:
        parsed_args = parser.parse_args(command_args)
    except SystemExit as exc:
        return exc.code or 0

    command = entry.target(app)
    return to_int(command.run(parsed_args))


def _configure_logging(level_name: str, *, verbose: bool) -> None:
    level = logging.DEBUG if verbose else resolve_log_level(level_name)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def resolve_log_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _command_description(entry: CommandEntry) -> str:
    doc = inspect.getdoc(entry.target) or ""
    return doc.strip()


def to_int(result: int | None) -> int:
    return 0 if result is None else result
