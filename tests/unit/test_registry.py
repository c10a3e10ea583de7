from __future__ import annotations

import pytest

from src.errors import TransportError
from tests.utils import FakeWebSocket
from src.state.connection import ConnectionState
from src.handlers.connections import ConnectionRegistry
from src.handlers.websocket.peer import PeerConnection


def test_add_is_idempotent_per_identity(registry: ConnectionRegistry, make_peer) -> None:
    peer = make_peer("a", register=False)
    assert registry.add(peer) is True
    assert registry.add(peer) is False
    assert len(registry) == 1
    assert peer in registry


def test_remove_absent_is_noop(registry: ConnectionRegistry, make_peer) -> None:
    peer = make_peer("a")
    assert registry.remove(peer) is True
    assert registry.remove(peer) is False
    assert registry.get_connection_count() == 0


def test_remove_ignores_other_peer_with_same_id(registry: ConnectionRegistry, make_peer) -> None:
    registered = make_peer("a")
    impostor = make_peer("a", register=False)
    assert registry.remove(impostor) is False
    assert registered in registry


def test_at_capacity() -> None:
    registry = ConnectionRegistry(max_connections=2)
    for name in ("a", "b"):
        assert registry.at_capacity() is False
        registry.add(PeerConnection(object(), connection_id=name))
    assert registry.at_capacity() is True


def test_reserved_slots_count_toward_capacity() -> None:
    registry = ConnectionRegistry(max_connections=2)
    first, second, third = FakeWebSocket(), FakeWebSocket(), FakeWebSocket()

    assert registry.try_reserve(first) is True
    assert registry.try_reserve(second) is True
    assert registry.try_reserve(third) is False
    assert registry.get_connection_count() == 0

    # Registering converts the reservation instead of taking a second slot.
    registry.add(PeerConnection(first, connection_id="first"))
    assert registry.at_capacity() is True
    assert registry.get_connection_count() == 1

    registry.release(second)
    assert registry.at_capacity() is False
    assert registry.try_reserve(third) is True



def test_unbounded_registry_never_at_capacity(registry: ConnectionRegistry, make_peer) -> None:
    for i in range(50):
        make_peer(f"p{i}")
    assert registry.at_capacity() is False


@pytest.mark.asyncio
async def test_for_each_other_skips_excluded(registry: ConnectionRegistry, make_peer) -> None:
    a, b, c = make_peer("a"), make_peer("b"), make_peer("c")
    seen: list[str] = []

    async def visit(peer: PeerConnection) -> None:
        seen.append(peer.connection_id)

    failed = await registry.for_each_other(a, visit)
    assert failed == []
    assert sorted(seen) == [b.connection_id, c.connection_id]


@pytest.mark.asyncio
async def test_for_each_other_none_targets_everyone(registry: ConnectionRegistry, make_peer) -> None:
    for name in ("a", "b", "c"):
        make_peer(name)
    seen: list[str] = []

    async def visit(peer: PeerConnection) -> None:
        seen.append(peer.connection_id)

    await registry.for_each_other(None, visit)
    assert sorted(seen) == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_for_each_other_isolates_failures(registry: ConnectionRegistry, make_peer) -> None:
    make_peer("a")
    bad = make_peer("b")
    make_peer("c")
    delivered: list[str] = []

    async def visit(peer: PeerConnection) -> None:
        if peer is bad:
            raise TransportError(peer.connection_id, "boom")
        delivered.append(peer.connection_id)

    failed = await registry.for_each_other(None, visit)

    assert failed == [bad]
    assert sorted(delivered) == ["a", "c"]
    assert bad not in registry
    assert bad.state is ConnectionState.CLOSED
    assert len(registry) == 2


@pytest.mark.asyncio
async def test_for_each_other_tolerates_removal_mid_fan_out(registry: ConnectionRegistry, make_peer) -> None:
    a = make_peer("a")
    b = make_peer("b")

    async def visit(peer: PeerConnection) -> None:
        # Closing b while the fan-out is in progress; b still gets one
        # attempt, which fails without escaping.
        if peer is a:
            b.mark_closed("client_closed")
            registry.remove(b)
        await peer.send_text("frame")

    failed = await registry.for_each_other(None, visit)

    assert failed == [b]
    assert a.ws.sent == ["frame"]
    assert b.ws.sent == []
    assert len(registry) == 1
