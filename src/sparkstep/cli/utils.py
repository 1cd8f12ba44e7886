"""
CLI utility helpers — consoles and option parsing.
"""

from __future__ import annotations

import typer
from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def parse_params(values: list[str]) -> list[tuple[str, str]]:
    """Parse repeated ``key=value`` options, keeping order.

    The value may be empty (``key=``) and may itself contain ``=``.
    """
    pairs: list[tuple[str, str]] = []
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {item!r}", param_hint="--param")
        pairs.append((key, value))
    return pairs
