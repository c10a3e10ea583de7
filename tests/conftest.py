from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.utils import FakeWebSocket
from src.handlers.connections import ConnectionRegistry
from src.handlers.websocket.peer import PeerConnection


def pytest_configure() -> None:
    # Keep `import src...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


@pytest.fixture
def make_peer(registry: ConnectionRegistry):
    """Build a registered peer backed by a FakeWebSocket."""

    def _make(name: str, *, fail_send: bool = False, register: bool = True) -> PeerConnection:
        peer = PeerConnection(FakeWebSocket(fail_send=fail_send), connection_id=name)
        if register:
            registry.add(peer)
        return peer

    return _make
