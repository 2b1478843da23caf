"""Schemas for festival endpoints."""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FestivalStatus = Literal["Active", "Inactive", "Upcoming"]
FestivalCategory = Literal["Religious", "Cultural", "Music", "Food"]


class FestivalCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    organizer: str = Field(..., min_length=1, max_length=120)
    date: dt.date
    status: FestivalStatus
    address: str = Field(..., min_length=1, max_length=255)
    category: FestivalCategory


class FestivalUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    organizer: str | None = Field(default=None, min_length=1, max_length=120)
    date: dt.date | None = None
    status: FestivalStatus | None = None
    address: str | None = Field(default=None, min_length=1, max_length=255)
    category: FestivalCategory | None = None

    model_config = ConfigDict(extra="forbid")


class FestivalRead(BaseModel):
    id: int
    name: str
    organizer: str
    date: dt.date
    status: str
    address: str
    category: str
    created_at: dt.datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["FestivalCreate", "FestivalRead", "FestivalUpdate"]
