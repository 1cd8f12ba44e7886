"""
Root Typer application for the sparkstep CLI.

``sparkstep submit`` builds a :class:`SparkStep` from the loaded settings
and runs it, which is handy for checking a host's Spark/HBase wiring
without going through the orchestrator.

Exit codes for ``submit``: 0 success, 1 failed submission, 2 configuration
error.
"""

from __future__ import annotations

import json

import typer
from typer import Typer

from sparkstep.cli.config import app as config_app
from sparkstep.cli.utils import console, err_console, parse_params

app = Typer(
    name="sparkstep",
    help="sparkstep — submit Spark jobs as orchestrated steps.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("sparkstep")
        except PackageNotFoundError:
            from sparkstep import __version__ as v
        typer.echo(f"sparkstep {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    log_format: str | None = typer.Option(None, "--log-format", help="console or json"),
) -> None:
    """sparkstep CLI — render and run spark-submit steps."""
    from sparkstep.core.config import get_settings
    from sparkstep.framework.logging import configure_logging

    # Flags win; otherwise the .env cascade / SPARKSTEP_LOG_* decide.
    settings = get_settings()
    configure_logging(
        level=(log_level or settings.log_level).upper(),  # type: ignore[arg-type]
        format=(log_format or settings.log_format).lower(),  # type: ignore[arg-type]
    )


@app.command("submit")
def submit(
    class_name: str = typer.Option(..., "--class-name", "-c", help="Application entry class"),
    jars: str | None = typer.Option(None, "--jars", "-j", help="Extra jars for spark-submit"),
    param: list[str] = typer.Option([], "--param", "-p", help="Application parameter key=value (repeatable)"),
    name: str = typer.Option("Spark Cubing", "--name", help="Step name used in logs"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the command instead of running it"),
    json_out: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Submit one Spark job with the current settings."""
    from sparkstep.core.config import get_settings
    from sparkstep.core.errors import ConfigError
    from sparkstep.orchestration import ExecutableContext, SparkStep

    step = SparkStep(name=name)
    step.set_class_name(class_name)
    if jars is not None:
        step.set_jars(jars)
    for key, value in parse_params(param):
        step.set_param(key, value)

    context = ExecutableContext(config=get_settings())

    try:
        if dry_run:
            cmd = step.render_command(context)
            if json_out:
                typer.echo(json.dumps({"command": cmd}))
            else:
                typer.echo(cmd)
            return
        result = step.run(context)
    except ConfigError as e:
        err_console.print(f"[red]Configuration Error:[/red] {e.message}", markup=True)
        raise typer.Exit(2) from e

    if json_out:
        typer.echo(json.dumps(result.to_dict()))
    elif result.succeed:
        console.print("[green]✓ Spark job succeeded[/green]")
    else:
        err_console.print(f"[red]✗ Spark job failed:[/red] {result.message}")

    if not result.succeed:
        raise typer.Exit(1)


app.add_typer(config_app, name="config", help="Configuration inspection.")
