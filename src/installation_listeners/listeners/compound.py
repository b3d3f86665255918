"""Compound listener for ordered fan-out to multiple listeners."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from installation_listeners.listeners.protocol import InstallationListener
from installation_listeners.types import Instrumentation, Transformer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, init=False)
class CompoundListener:
    """Fan-out listener that forwards events to child listeners in order.

    Install and reset events reach every child. Error events stop at the
    first child that returns None, so children placed after a suppressing
    listener never see the error. Every child receives the original error,
    not the value returned by its predecessor.

    Exceptions raised by a child are not caught and abort the fan-out.
    """

    listeners: tuple[InstallationListener, ...]

    def __init__(
        self, *listeners: InstallationListener | Sequence[InstallationListener]
    ) -> None:
        children: list[InstallationListener] = []
        for listener in listeners:
            if isinstance(listener, (list, tuple)):
                children.extend(listener)
            else:
                children.append(listener)
        object.__setattr__(self, "listeners", tuple(children))

    def on_install(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        for listener in self.listeners:
            listener.on_install(instrumentation, transformer)

    def on_error(
        self,
        instrumentation: Instrumentation,
        transformer: Transformer,
        error: BaseException | None,
    ) -> BaseException | None:
        result = error
        for listener in self.listeners:
            result = listener.on_error(instrumentation, transformer, error)
            if result is None:
                logger.debug(
                    "Listener %r suppressed error %r for %s",
                    listener,
                    error,
                    transformer,
                )
                return None
        return result

    def on_reset(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        for listener in self.listeners:
            listener.on_reset(instrumentation, transformer)
