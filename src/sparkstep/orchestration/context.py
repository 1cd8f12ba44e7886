"""Executable context — what the orchestrator hands a step when it runs.

The context carries the process-wide :class:`ClusterSettings` explicitly,
plus two optional collaborators:

- ``locator`` — resource lookup; defaults to a :class:`SearchPathLocator`
  built from the settings.
- ``line_sink`` — receives every output line of the submission, e.g. to
  ship logs somewhere.

Example::

    context = ExecutableContext(config=get_settings())
    result = step.run(context)
"""

from __future__ import annotations

from dataclasses import dataclass

from sparkstep.core.config import ClusterSettings
from sparkstep.execution.process import LineSink
from sparkstep.execution.resources import ResourceLocator, SearchPathLocator


@dataclass
class ExecutableContext:
    """Collaborators supplied by the orchestrator for one step run."""

    config: ClusterSettings
    locator: ResourceLocator | None = None
    line_sink: LineSink | None = None

    def resource_locator(self) -> ResourceLocator:
        if self.locator is not None:
            return self.locator
        return SearchPathLocator.from_settings(self.config)
