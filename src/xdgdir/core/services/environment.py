"""Environment sources consulted by the resolver.

The resolver never touches ``os.environ`` directly; it asks an
``EnvironmentSource`` instead, so resolution can be exercised against a fixed
mapping without mutating the process environment.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentSource(Protocol):
    def lookup(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None when it is not set."""
        ...


class ProcessEnvironment:
    """Reads the live process environment on every lookup."""

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """Reads from a snapshot of the given mapping.

    The mapping is copied on construction; later changes to the caller's
    dict are not observed.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values = dict(values or {})

    def lookup(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def __repr__(self) -> str:
        return f"MappingEnvironment({self._values!r})"
