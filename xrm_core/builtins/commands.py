"""Built-in commands that manage the registry list and the active registry."""

from __future__ import annotations

import inspect
import sys
from argparse import ArgumentParser, Namespace
from typing import Sequence

from xrm_core.api import XrmAbstractCommand, xrmcommand
from xrm_core.errors import (
    ExternalToolError,
    ProbeError,
    RegistryConfigError,
    UnresolvedActiveError,
    WriteFailureError,
    XrmError,
)
from xrm_core.models import RegistryEntry
from xrm_core.ping import probe
from xrm_core.resolver import resolve_by_name, resolve_by_url


class _RegistryCommand(XrmAbstractCommand):
    """Shared helpers for commands that read the registry list."""

    tag = "xrm"

    def _say(self, message: str) -> None:
        print(f"[xrm:{self.tag}] {message}")

    def _error(self, exc: BaseException | str) -> int:
        print(f"[xrm:{self.tag}] error: {exc}", file=sys.stderr)
        return 2 if isinstance(exc, WriteFailureError) else 1

    def _load_registries(self) -> list[RegistryEntry]:
        """Load the list, reporting config problems and falling back to no entries."""

        try:
            return self.app.store.load()
        except RegistryConfigError as exc:
            self._error(exc)
            return []

    def _active_url(self) -> str | None:
        try:
            return self.app.bridge.get_active()
        except ExternalToolError as exc:
            self._error(exc)
            return None

    def _prompt(self, message: str) -> str | None:
        try:
            return input(message).strip()
        except EOFError:
            return None


@xrmcommand(name="ls")
class LsCommand(_RegistryCommand):
    """List every known registry, marking the active one with '*'."""

    tag = "ls"

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        pass

    def run(self, args: Namespace) -> int:
        registries = self._load_registries()
        if not registries:
            self._say("no registries found")
            return 0
        active = resolve_by_url(registries, self._active_url())
        for line in format_listing(registries, active):
            print(line)
        return 0


def format_listing(registries: Sequence[RegistryEntry], active: RegistryEntry) -> list[str]:
    if not registries:
        return []
    width = max(len(entry.name) for entry in registries) + 1
    lines: list[str] = []
    for entry in registries:
        marker = "*" if not active.is_unknown and entry == active else " "
        lines.append(f"{marker} {entry.name.ljust(width)}-> {entry.url}")
    return lines


@xrmcommand(name="use")
class UseCommand(_RegistryCommand):
    """Switch the active registry globally (default) or for the current project."""

    tag = "use"

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("name", help="registry name")
        scope = parser.add_mutually_exclusive_group()
        scope.add_argument(
            "--local",
            action="store_true",
            help="Write the registry to .npmrc in the current directory.",
        )
        scope.add_argument(
            "--global",
            action="store_true",
            dest="global_",
            help="Set the registry through npm config (default).",
        )

    def run(self, args: Namespace) -> int:
        try:
            registries = self.app.store.load()
            target = resolve_by_name(registries, args.name)
            if getattr(args, "local", False):
                path = self.app.patcher.set_active(self.app.cwd, target.url)
                self._say(f"switched local registry to '{target.name}' ({path})")
                return 0
            self.app.bridge.set_active(target.url)
        except XrmError as exc:
            return self._error(exc)
        self._say(f"switched global registry to '{target.name}'")
        return 0


@xrmcommand(name="add")
class AddCommand(_RegistryCommand):
    """Add a registry, prompting for the name and url when not given."""

    tag = "add"

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("--name", help="registry name")
        parser.add_argument("--url", help="registry url")

    def run(self, args: Namespace) -> int:
        name = getattr(args, "name", None) or self._prompt("registry name: ")
        url = getattr(args, "url", None) or self._prompt("registry url: ")
        if not name or not url:
            return self._error("both a name and a url are required")
        try:
            entry = RegistryEntry(name=name, url=url)
            self.app.store.add(entry)
        except XrmError as exc:
            return self._error(exc)
        self._say(f"registry '{entry.name}' added")
        return 0


@xrmcommand(name="del")
class DelCommand(_RegistryCommand):
    """Delete a registry by name."""

    tag = "del"

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("name", help="registry name")

    def run(self, args: Namespace) -> int:
        try:
            self.app.store.remove(args.name)
        except XrmError as exc:
            return self._error(exc)
        self._say(f"registry '{args.name}' deleted")
        return 0


@xrmcommand(name="current")
class CurrentCommand(_RegistryCommand):
    """Show the registry npm currently uses."""

    tag = "current"

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        pass

    def run(self, args: Namespace) -> int:
        url = self._active_url()
        if url is None:
            return 1
        try:
            entry = self._resolve_active(url)
        except UnresolvedActiveError as exc:
            self._say(str(exc))
            return 0
        self._say(f"current registry: {entry.name}:{entry.url}")
        return 0

    def _resolve_active(self, url: str) -> RegistryEntry:
        entry = resolve_by_url(self._load_registries(), url)
        if entry.is_unknown:
            suffix = f" ({url})" if url else ""
            raise UnresolvedActiveError(f"current registry not found{suffix}")
        return entry


@xrmcommand(name="ping")
class PingCommand(_RegistryCommand):
    """Measure the response time of a registry, chosen interactively if not named."""

    tag = "ping"

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        parser.add_argument("name", nargs="?", help="registry name")

    def run(self, args: Namespace) -> int:
        registries = self._load_registries()
        if not registries:
            self._say("no registries found")
            return 0
        name = getattr(args, "name", None)
        if name:
            try:
                target = resolve_by_name(registries, name)
            except XrmError as exc:
                return self._error(exc)
        else:
            target = self._choose(registries)
            if target is None:
                return self._error("no registry selected")
        try:
            elapsed = probe(target.url, timeout=self.app.settings.ping_timeout)
        except ProbeError as exc:
            self._say(f"ping failed: {exc}")
            return 1
        self._say(f"{target.name} responded in {elapsed:.0f}ms")
        return 0

    def _choose(self, registries: Sequence[RegistryEntry]) -> RegistryEntry | None:
        for index, entry in enumerate(registries, start=1):
            print(f"  {index}) {entry.name} -> {entry.url}")
        answer = self._prompt(f"select a registry [1-{len(registries)}]: ")
        if not answer:
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(registries):
            return registries[int(answer) - 1]
        try:
            return resolve_by_name(registries, answer)
        except XrmError:
            return None


@xrmcommand(name="help")
class HelpCommand(_RegistryCommand):
    """Display the list of available commands."""

    tag = "help"

    @classmethod
    def configure(cls, parser: ArgumentParser) -> None:
        pass

    def run(self, args: Namespace) -> int:
        print_overview(self.app.commands.entries())
        return 0


def print_overview(entries) -> None:
    print("Usage: xrm <command> [args...]\n")
    print("Commands:")
    for entry in entries:
        doc = inspect.getdoc(entry.target) or ""
        lines = doc.strip().splitlines()
        short = lines[0] if lines else ""
        print(f"  {entry.name:<10} {short}")
