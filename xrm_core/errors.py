"""Typed errors raised by the xrm core."""

from __future__ import annotations

from typing import Sequence


class XrmError(Exception):
    """Base class for xrm errors."""


class RegistryConfigError(XrmError):
    """The registries file cannot be used."""


class ConfigMissingError(RegistryConfigError):
    """Raised when the registries file does not exist."""


class ConfigCorruptError(RegistryConfigError):
    """Raised when the registries file does not hold a list of entries."""


class DuplicateNameError(XrmError):
    """Raised when adding a registry whose name is already taken."""


class RegistryNotFoundError(XrmError):
    """Raised when no registry carries the requested name."""


class InvalidEntryError(XrmError):
    """Raised when a registry name or URL is malformed."""


class WriteFailureError(XrmError):
    """Raised when a config file cannot be read or written."""


class UnresolvedActiveError(XrmError):
    """Raised when the active URL matches no known registry."""


class ProbeError(XrmError):
    """Raised when a latency probe does not get a response."""


class ExternalToolError(XrmError):
    """Raised when a delegated package-manager command fails."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
