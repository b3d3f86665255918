"""Shared test fixtures for installation-listeners."""

from __future__ import annotations

from unittest.mock import MagicMock, create_autospec

import pytest

from installation_listeners.listeners.protocol import InstallationListener


class RecordingSink:
    """Sink that records every write call separately."""

    def __init__(self) -> None:
        self.writes: list[str] = []

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def instrumentation():
    """An opaque instrumentation handle."""
    handle = MagicMock(name="instrumentation")
    handle.__str__.return_value = "Instrumentation@1"
    return handle


@pytest.fixture
def transformer():
    """An opaque class-file transformer."""
    value = MagicMock(name="transformer")
    value.__str__.return_value = "Transformer@2"
    return value


@pytest.fixture
def error():
    """A raised error carrying a traceback."""
    try:
        raise RuntimeError("transform failed")
    except RuntimeError as exc:
        return exc


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_listener():
    """Factory for spec'd mock listeners."""

    def _make(name: str) -> MagicMock:
        return create_autospec(InstallationListener, instance=True, name=name)

    return _make
