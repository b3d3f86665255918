"""Installation listener protocol definition."""

from __future__ import annotations

from typing import Protocol

from installation_listeners.types import Instrumentation, Transformer


class InstallationListener(Protocol):
    """Protocol for receiving agent installation lifecycle events.

    All methods are synchronous and are called by whoever installs the
    transformer, one event at a time.
    """

    def on_install(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        """Called after a transformer was installed."""
        ...

    def on_error(
        self,
        instrumentation: Instrumentation,
        transformer: Transformer,
        error: BaseException | None,
    ) -> BaseException | None:
        """Called when installing or applying a transformer failed.

        Returns:
            The error to propagate, or None if the error was handled and
            must not be escalated by the caller.
        """
        ...

    def on_reset(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        """Called after a transformer was reset (uninstalled)."""
        ...
