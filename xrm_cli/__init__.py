"""Command line entry point for xrm."""

from .main import main

__all__ = ["main"]
