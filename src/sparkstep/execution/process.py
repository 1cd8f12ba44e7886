"""Process executor — run a shell command line and capture its output.

Executes a submission command as a child process through a shell
(``bash -c`` on POSIX, ``cmd.exe /C`` on Windows), with stderr merged
into stdout.  Every output line is handed to a line sink as soon as it
is read and kept in a buffer; the call blocks until the child exits.

Outcome classification:

    ┌─────────────────────────────────┬──────────────────────────────────┐
    │ What happened                   │ ExecuteResult                    │
    ├─────────────────────────────────┼──────────────────────────────────┤
    │ exit status 0                   │ succeeded("\\n".join(lines))      │
    │ exit status N != 0              │ failed("OS command error exit    │
    │                                 │         with N")                 │
    │ shell could not be started      │ failed("Failed to start ...")    │
    │ reading output / sink raised    │ failed("I/O error while ...")    │
    └─────────────────────────────────┴──────────────────────────────────┘

Nothing is retried and no fault escapes ``execute``.

Example:
    >>> executor = ProcessExecutor()
    >>> result = executor.execute("printf 'a\\nb\\n'", print)
    a
    b
    >>> result.output
    'a\\nb'

Tags:
    sparkstep, execution, subprocess, output-capture

Doc-Types:
    api-reference
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from sparkstep.core.errors import CommandFailedError, ProcessError
from sparkstep.execution.result import ExecuteResult
from sparkstep.framework.logging import get_logger

logger = get_logger(__name__)

LineSink = Callable[[str], None]


def default_shell() -> tuple[str, ...]:
    """Shell prefix used to run a command string on this platform."""
    if sys.platform.startswith("win"):
        return ("cmd.exe", "/C")
    return ("bash", "-c")


class ProcessExecutor:
    """Runs one command line per call and classifies the outcome."""

    def __init__(
        self,
        *,
        shell: Sequence[str] | None = None,
        env: Mapping[str, str] | None = None,
        inherit_env: bool = True,
        cwd: str | Path | None = None,
        kill_timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize the executor.

        Args:
            shell: Argv prefix the command string is appended to. Defaults
                to :func:`default_shell`.
            env: Variables overlaid on the child environment.
            inherit_env: If True, the child inherits ``os.environ``
                (with ``env`` overlaid). If False, only ``env`` is passed.
            cwd: Working directory for the child.
            kill_timeout_seconds: Seconds to wait after SIGTERM before
                SIGKILL when the child must be stopped early.
        """
        self._shell = tuple(shell) if shell is not None else default_shell()
        self._env = dict(env or {})
        self._inherit_env = inherit_env
        self._cwd = str(cwd) if cwd is not None else None
        self._kill_timeout = kill_timeout_seconds

    def execute(self, command: str, line_sink: LineSink | None = None) -> ExecuteResult:
        """Run ``command`` to completion.

        Lines reach ``line_sink`` in the order the child wrote them, all
        before this method returns.
        """
        try:
            output = self._run_native(command, line_sink)
        except ProcessError as exc:
            logger.error("process.failed", error=exc.message, **exc.context.to_dict())
            return ExecuteResult.failed(exc.message)
        return ExecuteResult.succeeded(output)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_env(self) -> dict[str, str]:
        env = dict(os.environ) if self._inherit_env else {}
        env.update(self._env)
        return env

    def _run_native(self, command: str, line_sink: LineSink | None) -> str:
        """Spawn, stream, wait. Raises ProcessError on any failure."""
        argv = [*self._shell, command]
        try:
            process = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                env=self._build_env(),
                cwd=self._cwd,
            )
        except (OSError, ValueError) as exc:
            raise ProcessError(f"Failed to start process: {exc}", cause=exc) from exc

        lines: list[str] = []
        try:
            for raw in process.stdout:
                line = raw.rstrip("\r\n")
                lines.append(line)
                if line_sink is not None:
                    line_sink(line)
        except Exception as exc:
            self._stop(process)
            raise ProcessError(f"I/O error while reading output: {exc}", cause=exc) from exc
        finally:
            if process.stdout is not None:
                process.stdout.close()

        exit_code = process.wait()
        if exit_code != 0:
            raise CommandFailedError(exit_code, command)
        return "\n".join(lines)

    def _stop(self, process: subprocess.Popen) -> None:
        """SIGTERM, then SIGKILL after the grace period."""
        if process.poll() is not None:
            return
        try:
            process.terminate()
            try:
                process.wait(timeout=self._kill_timeout)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
        except ProcessLookupError:
            pass  # Process already gone
