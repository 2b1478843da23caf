"""Connection management for the realtime notification websocket."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from typing import Any, DefaultDict, Iterable, Set
from uuid import uuid4

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from app.domain.entities import Role, parse_role
from app.domain.exceptions import InvalidAuthentication, ValidationError

logger = logging.getLogger(__name__)

POLICY_VIOLATION = 1008


def role_group(role: Role | str) -> str:
    """Return the delivery group key for ``role``."""

    return f"role:{Role(role).value}"


def user_group(user_id: str) -> str:
    """Return the delivery group key for a single user or vendor."""

    return f"user:{user_id}"


class ConnectionRegistry:
    """Track live websocket connections and the delivery groups they joined.

    A connection starts anonymous: it only receives ``broadcast_to_all``
    messages until :meth:`authenticate` places it into ``role:<role>`` and,
    optionally, ``user:<id>``. Every mutating method is synchronous, so a
    membership change is applied in one step on the event loop.
    """

    def __init__(self) -> None:
        self._connections: dict[str, WebSocket] = {}
        self._memberships: dict[str, Set[str]] = {}
        self._groups: DefaultDict[str, Set[str]] = defaultdict(set)

    def __len__(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> str:
        """Accept ``websocket`` and register it as an anonymous connection."""

        await websocket.accept()
        connection_id = uuid4().hex
        self._connections[connection_id] = websocket
        self._memberships[connection_id] = set()
        logger.info("Realtime client connected: %s", connection_id)
        return connection_id

    def authenticate(
        self,
        connection_id: str,
        *,
        role: Role | str | None,
        user_id: str | None = None,
    ) -> frozenset[str]:
        """Join ``connection_id`` to the groups of the claimed identity.

        Re-authenticating adds the new groups to the existing ones.
        """

        if connection_id not in self._connections:
            raise InvalidAuthentication(f"Unknown connection {connection_id}")
        try:
            parsed_role = parse_role(role)
        except ValidationError as exc:
            raise InvalidAuthentication(str(exc)) from exc

        groups = {role_group(parsed_role)}
        if user_id is not None and str(user_id).strip():
            groups.add(user_group(str(user_id).strip()))

        for group in groups:
            self._groups[group].add(connection_id)
        self._memberships[connection_id].update(groups)
        logger.info(
            "Realtime client %s authenticated as %s%s",
            connection_id,
            parsed_role.value,
            f" (user: {user_id})" if user_id else "",
        )
        return frozenset(self._memberships[connection_id])

    def disconnect(self, connection_id: str) -> None:
        """Forget ``connection_id`` and every group membership it had."""

        self._connections.pop(connection_id, None)
        for group in self._memberships.pop(connection_id, set()):
            members = self._groups.get(group)
            if members is None:
                continue
            members.discard(connection_id)
            if not members:
                self._groups.pop(group, None)

    async def close(self, connection_id: str, *, code: int = POLICY_VIOLATION) -> None:
        """Drop ``connection_id`` and close its websocket with ``code``."""

        websocket = self._connections.get(connection_id)
        self.disconnect(connection_id)
        if websocket is None or websocket.application_state == WebSocketState.DISCONNECTED:
            return
        try:
            await websocket.close(code=code)
        except RuntimeError:
            logger.debug("Websocket %s was already closed", connection_id)

    async def close_all(self) -> None:
        for connection_id in list(self._connections):
            await self.close(connection_id, code=1001)

    def groups_of(self, connection_id: str) -> frozenset[str]:
        return frozenset(self._memberships.get(connection_id, ()))

    def members(self, group: str) -> frozenset[str]:
        return frozenset(self._groups.get(group, ()))

    async def broadcast_to_group(self, group: str, event_name: str, payload: Any) -> int:
        """Send an event to every connection in ``group``; return the delivery count."""

        return await self._send_many(self._groups.get(group, ()), event_name, payload)

    async def broadcast_to_all(self, event_name: str, payload: Any) -> int:
        """Send an event to every live connection, authenticated or not."""

        return await self._send_many(self._connections, event_name, payload)

    async def send_to_connection(self, connection_id: str, event_name: str, payload: Any) -> int:
        return await self._send_many((connection_id,), event_name, payload)

    async def _send_many(
        self, connection_ids: Iterable[str], event_name: str, payload: Any
    ) -> int:
        # Encode once so a payload that cannot be serialized fails the whole
        # broadcast instead of being blamed on a connection.
        text = json.dumps({"type": event_name, "data": payload})
        delivered = 0
        for connection_id in list(connection_ids):
            websocket = self._connections.get(connection_id)
            if websocket is None:
                continue
            try:
                await websocket.send_text(text)
            except Exception:  # transport errors vary by server implementation
                logger.warning(
                    "Dropping realtime client %s after failed '%s' delivery",
                    connection_id,
                    event_name,
                    exc_info=True,
                )
                self.disconnect(connection_id)
            else:
                delivered += 1
        return delivered


__all__ = ["ConnectionRegistry", "POLICY_VIOLATION", "role_group", "user_group"]
