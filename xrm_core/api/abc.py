"""Abstract base class for xrm commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xrm_core.app import XrmApp


class XrmAbstractCommand(ABC):
    """Base interface for xrm commands."""

    def __init__(self, app: "XrmApp") -> None:
        self.app = app

    @classmethod
    @abstractmethod
    def configure(cls, parser: ArgumentParser) -> None:
        """Let the command configure CLI arguments."""

    @abstractmethod
    def run(self, args: Namespace) -> int:
        """Execute the command with parsed arguments."""
