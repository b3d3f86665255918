"""Listener configuration loading and schemas."""

from installation_listeners.config.loader import (
    build_chain,
    build_listener,
    load_listener,
)
from installation_listeners.config.schema import ListenerManifest, ListenerSpec

__all__ = [
    "ListenerManifest",
    "ListenerSpec",
    "build_chain",
    "build_listener",
    "load_listener",
]
