"""installation-listeners: lifecycle notifications for instrumentation agents."""

from installation_listeners.config import (
    ListenerManifest,
    ListenerSpec,
    build_chain,
    build_listener,
    load_listener,
)
from installation_listeners.exceptions import (
    InstallationListenerError,
    ListenerConfigError,
)
from installation_listeners.listeners import (
    ERROR_SUPPRESSING,
    NO_OP,
    CompoundListener,
    ErrorSuppressingListener,
    InstallationListener,
    NoOpListener,
    StreamWritingListener,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "InstallationListener",
    "NoOpListener",
    "NO_OP",
    "ErrorSuppressingListener",
    "ERROR_SUPPRESSING",
    "StreamWritingListener",
    "CompoundListener",
    "ListenerManifest",
    "ListenerSpec",
    "build_chain",
    "build_listener",
    "load_listener",
    "InstallationListenerError",
    "ListenerConfigError",
]
