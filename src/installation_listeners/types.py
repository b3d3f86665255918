"""Opaque collaborator types passed through listener calls."""

from __future__ import annotations

from typing import Any, Protocol

Instrumentation = Any
"""Handle to the live instrumentation session. Never inspected."""

Transformer = Any
"""The class-file transformer being installed, failed or reset. Never inspected."""


class Sink(Protocol):
    """Text write target used by stream-writing listeners."""

    def write(self, text: str, /) -> Any: ...
