from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from installation_listeners.config.schema import ListenerManifest, ListenerSpec
from installation_listeners.exceptions import ListenerConfigError
from installation_listeners.listeners import (
    ERROR_SUPPRESSING,
    NO_OP,
    CompoundListener,
    InstallationListener,
    StreamWritingListener,
)

logger = logging.getLogger(__name__)


def build_listener(spec: ListenerSpec) -> InstallationListener:
    """Build a listener from its declaration.

    Stream-writing listeners are bound to ``sys.stdout`` or ``sys.stderr``
    as they are at build time.
    """
    if spec.kind == "no_op":
        return NO_OP
    if spec.kind == "error_suppressing":
        return ERROR_SUPPRESSING
    if spec.kind == "stream_writing":
        if spec.target == "stderr":
            return StreamWritingListener.to_system_err()
        return StreamWritingListener.to_system_out()
    # compound
    return CompoundListener([build_listener(child) for child in spec.listeners])


def build_chain(manifest: ListenerManifest) -> InstallationListener:
    """Combine the top-level listeners of a manifest into one listener."""
    listeners = [build_listener(spec) for spec in manifest.listeners]

    if not listeners:
        return NO_OP
    if len(listeners) == 1:
        return listeners[0]
    return CompoundListener(listeners)


def load_listener(path: str | Path) -> InstallationListener:
    """Load a listener chain from a YAML file.

    Args:
        path: Path to a YAML document with a top-level ``listeners`` list.

    Returns:
        The configured listener, ``NO_OP`` if none are declared.

    Raises:
        ListenerConfigError: If the file is missing, unreadable or invalid.
    """
    config_path = Path(path)

    if not config_path.is_file():
        raise ListenerConfigError(
            f"Listener configuration not found: {config_path}", path=str(config_path)
        )

    try:
        with config_path.open("r", encoding="utf-8") as file_handle:
            data: Any = yaml.safe_load(file_handle)
    except Exception as exc:
        raise ListenerConfigError(
            f"Failed to read listener configuration: {exc}", path=str(config_path)
        ) from exc

    try:
        manifest = ListenerManifest(**(data or {}))
    except Exception as exc:
        raise ListenerConfigError(
            f"Invalid listener configuration: {exc}", path=str(config_path)
        ) from exc

    listener = build_chain(manifest)
    logger.debug("Loaded listener %r from %s", listener, config_path)
    return listener
