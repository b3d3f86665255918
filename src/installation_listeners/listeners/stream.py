"""Listener that writes lifecycle events to a text stream."""

from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass

from installation_listeners.types import Instrumentation, Sink, Transformer

PREFIX = "[Byte Buddy]"


@dataclass(frozen=True, slots=True, eq=False)
class StreamWritingListener:
    """Writes one line per event to ``sink``, plus the traceback on errors.

    Errors are reported but never suppressed. Two instances are equal only
    when they write to the very same sink object.
    """

    sink: Sink

    @classmethod
    def to_system_out(cls) -> StreamWritingListener:
        """Listener bound to the current ``sys.stdout``."""
        return cls(sys.stdout)

    @classmethod
    def to_system_err(cls) -> StreamWritingListener:
        """Listener bound to the current ``sys.stderr``."""
        return cls(sys.stderr)

    def _write(
        self, event: str, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        self.sink.write(f"{PREFIX} {event} {transformer!s} on {instrumentation!s}\n")

    def on_install(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        self._write("INSTALL", instrumentation, transformer)

    def on_error(
        self,
        instrumentation: Instrumentation,
        transformer: Transformer,
        error: BaseException | None,
    ) -> BaseException | None:
        self._write("ERROR", instrumentation, transformer)
        if error is not None:
            self.sink.write("".join(traceback.format_exception(error)))
        return error

    def on_reset(
        self, instrumentation: Instrumentation, transformer: Transformer
    ) -> None:
        self._write("RESET", instrumentation, transformer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StreamWritingListener):
            return NotImplemented
        return self.sink is other.sink

    def __hash__(self) -> int:
        return hash((StreamWritingListener, id(self.sink)))
