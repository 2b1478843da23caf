"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None
    type: str
    message: str
    timestamp: datetime | None
    read: bool
    entity_id: str | None = None
    target_roles: list[str] = Field(default_factory=list)
    target_user_id: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class UnreadCountRead(BaseModel):
    count: int


__all__ = ["NotificationRead", "UnreadCountRead"]
