"""Null installation listener (no-op)."""

from __future__ import annotations

from dataclasses import dataclass

from installation_listeners.types import Instrumentation, Transformer


@dataclass(frozen=True, slots=True)
class NoOpListener:
    """Listener that does nothing and never suppresses an error. Used as default."""

    def on_install(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        pass

    def on_error(
        self,
        instrumentation: Instrumentation,
        transformer: Transformer,
        error: BaseException | None,
    ) -> BaseException | None:
        return error

    def on_reset(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        pass


NO_OP = NoOpListener()
