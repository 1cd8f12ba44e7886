"""
CLI: ``sparkstep config`` — configuration inspection.
"""

from __future__ import annotations

import typer

from sparkstep.cli.utils import console

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show the resolved cluster settings."""
    from sparkstep.core.config import get_settings

    settings = get_settings()

    if format == "json":
        console.print_json(settings.model_dump_json())
        return

    if format == "env":
        for key, value in settings.model_dump().items():
            console.print(f"SPARKSTEP_{key.upper()}={value}", markup=False)
        return

    from rich.markup import escape
    from rich.table import Table

    env_files = getattr(settings, "_env_files_loaded", [])
    if env_files:
        console.print("[bold]Env Files Loaded:[/bold]")
        for f in env_files:
            console.print(f"  • {f}")

    table = Table()
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        shown = "[dim]<unset>[/dim]" if value in (None, "", [], {}) else escape(str(value))
        table.add_row(key, shown)
    console.print(table)
