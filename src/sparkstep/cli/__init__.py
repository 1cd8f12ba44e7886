"""Command-line interface for sparkstep."""

from sparkstep.cli.app import app

__all__ = ["app"]
