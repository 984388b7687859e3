"""Core runtime pieces for the xrm registry manager."""

from .app import XrmApp
from .models import UNKNOWN_REGISTRY, RegistryEntry
from .npm import NpmConfigBridge
from .npmrc import NpmrcPatcher
from .paths import UserDirs
from .settings import SettingsResolver, XrmSettings
from .store import DEFAULT_REGISTRIES, RegistryStore

__all__ = [
    "XrmApp",
    "RegistryEntry",
    "UNKNOWN_REGISTRY",
    "RegistryStore",
    "DEFAULT_REGISTRIES",
    "NpmConfigBridge",
    "NpmrcPatcher",
    "SettingsResolver",
    "XrmSettings",
    "UserDirs",
]
