"""Listener that marks every installation error as handled."""

from __future__ import annotations

from dataclasses import dataclass

from installation_listeners.types import Instrumentation, Transformer


@dataclass(frozen=True, slots=True)
class ErrorSuppressingListener:
    """Suppresses all errors. Install and reset events are ignored."""

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
        return None

    def on_reset(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        pass


ERROR_SUPPRESSING = ErrorSuppressingListener()
