"""Tests for websocket connection tracking and group delivery."""

from __future__ import annotations

import pytest

from app.domain.exceptions import InvalidAuthentication
from app.infrastructure.notifications import POLICY_VIOLATION, role_group, user_group

pytestmark = pytest.mark.anyio


async def test_new_connections_are_anonymous(registry, connect) -> None:
    connection_id, websocket = await connect()

    assert websocket.accepted
    assert len(registry) == 1
    assert registry.groups_of(connection_id) == frozenset()


async def test_authenticate_joins_role_and_user_groups(registry, connect) -> None:
    connection_id, _ = await connect()

    groups = registry.authenticate(connection_id, role="vendor", user_id="15")

    assert groups == {role_group("vendor"), user_group("15")}
    assert connection_id in registry.members("role:vendor")
    assert connection_id in registry.members("user:15")

    # Authenticating again with the same identity changes nothing.
    assert registry.authenticate(connection_id, role="vendor", user_id="15") == groups


async def test_authenticate_rejects_missing_or_unknown_role(registry, connect) -> None:
    connection_id, _ = await connect()

    with pytest.raises(InvalidAuthentication):
        registry.authenticate(connection_id, role=None, user_id="U1")
    with pytest.raises(InvalidAuthentication):
        registry.authenticate(connection_id, role="superuser")
    with pytest.raises(InvalidAuthentication):
        registry.authenticate("missing", role="admin")

    assert registry.groups_of(connection_id) == frozenset()


async def test_group_broadcast_reaches_members_only(registry, connect) -> None:
    _, admin = await connect("admin")
    _, vendor = await connect("vendor", "3")
    _, anonymous = await connect()

    delivered = await registry.broadcast_to_group("role:admin", "adminNotification", {"id": 1})

    assert delivered == 1
    assert admin.messages == [{"type": "adminNotification", "data": {"id": 1}}]
    assert vendor.messages == []
    assert anonymous.messages == []

    assert await registry.broadcast_to_group("user:nobody", "userNotification", {}) == 0


async def test_broadcast_to_all_includes_anonymous_connections(registry, connect) -> None:
    _, admin = await connect("admin")
    _, anonymous = await connect()

    assert await registry.broadcast_to_all("festivalsUpdate", []) == 2
    assert admin.events("festivalsUpdate") == [[]]
    assert anonymous.events("festivalsUpdate") == [[]]


async def test_failed_send_drops_only_that_connection(registry, connect) -> None:
    broken_id, _ = await connect("user", "U1", fail=True)
    healthy_id, healthy = await connect("user", "U1")

    delivered = await registry.broadcast_to_group("user:U1", "userNotification", {"id": 9})

    assert delivered == 1
    assert healthy.events("userNotification") == [{"id": 9}]
    assert registry.members("user:U1") == {healthy_id}
    assert registry.groups_of(broken_id) == frozenset()
    assert len(registry) == 1


async def test_disconnect_removes_every_membership(registry, connect) -> None:
    connection_id, _ = await connect("vendor", "8")

    registry.disconnect(connection_id)
    registry.disconnect(connection_id)

    assert len(registry) == 0
    assert registry.members("role:vendor") == frozenset()
    assert registry.members("user:8") == frozenset()


async def test_close_uses_policy_violation_code(registry, connect) -> None:
    connection_id, websocket = await connect()

    await registry.close(connection_id)

    assert websocket.closed_with == POLICY_VIOLATION
    assert len(registry) == 0
