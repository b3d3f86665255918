"""Installation listener strategies."""

from installation_listeners.listeners.compound import CompoundListener
from installation_listeners.listeners.noop import NO_OP, NoOpListener
from installation_listeners.listeners.protocol import InstallationListener
from installation_listeners.listeners.stream import StreamWritingListener
from installation_listeners.listeners.suppressing import (
    ERROR_SUPPRESSING,
    ErrorSuppressingListener,
)

__all__ = [
    "InstallationListener",
    "NoOpListener",
    "NO_OP",
    "ErrorSuppressingListener",
    "ERROR_SUPPRESSING",
    "StreamWritingListener",
    "CompoundListener",
]
