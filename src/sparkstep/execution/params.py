"""Step parameter store.

An insertion-ordered ``name -> value`` mapping scoped to one step
instance.  Names and values are arbitrary strings; nothing is validated.
Two names are reserved by the command builder:

- ``className`` — entry class of the submitted application
- ``jars`` — auxiliary jars for ``spark-submit``

Both are ordinary entries; only the name sets them apart.

Once submission begins the store is frozen; reads keep working and
writes raise :class:`~sparkstep.core.errors.FrozenParametersError`.

Tags:
    sparkstep, execution, params

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator

from sparkstep.core.errors import FrozenParametersError

CLASS_NAME = "className"
JARS = "jars"


class ParameterStore:
    """Insertion-ordered string parameters for a single step."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._params: dict[str, str] = {}
        self._frozen = False
        for name, value in (initial or {}).items():
            self.set(name, value)

    def set(self, name: str, value: str) -> None:
        """Set ``name`` to ``value``, overwriting any earlier value.

        An overwrite keeps the original insertion position.
        """
        if self._frozen:
            raise FrozenParametersError(name)
        self._params[name] = value

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._params.get(name, default)

    def entries(self) -> ItemsView[str, str]:
        """Live ``(name, value)`` view in insertion order; re-iterable."""
        return self._params.items()

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def to_dict(self) -> dict[str, str]:
        return dict(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"ParameterStore({self._params!r}{state})"
