"""Exception hierarchy for installation-listeners."""

from __future__ import annotations


class InstallationListenerError(Exception):
    """Base exception for all installation-listeners errors."""


class ListenerConfigError(InstallationListenerError):
    """Error loading or validating a listener configuration."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
