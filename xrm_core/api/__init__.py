"""Convenience imports for xrm command helpers."""

from .abc import XrmAbstractCommand
from .decorators import xrmcommand

__all__ = [
    "XrmAbstractCommand",
    "xrmcommand",
]
