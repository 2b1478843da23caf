"""Persistence layer for festivals."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session

from app.domain.entities import Festival
from app.infrastructure.models import FestivalModel
from app.utils import ensure_app_timezone


class FestivalRepository:
    """Provide CRUD operations for festivals."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, status: str | None = None) -> Sequence[Festival]:
        query = self.session.query(FestivalModel)
        if status:
            query = query.filter(FestivalModel.status == status)
        query = query.order_by(asc(FestivalModel.date), desc(FestivalModel.id))
        return [self._to_entity(model) for model in query.all()]

    def get(self, festival_id: int) -> Festival | None:
        model = self.session.get(FestivalModel, festival_id)
        return self._to_entity(model) if model else None

    def create(self, festival: Festival) -> Festival:
        model = FestivalModel()
        self._apply_entity_to_model(model, festival)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, festival: Festival) -> Festival:
        model = self.session.get(FestivalModel, festival.id)
        if model is None:
            msg = f"Festival with id {festival.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, festival)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, festival_id: int) -> None:
        model = self.session.get(FestivalModel, festival_id)
        if model is None:
            msg = f"Festival with id {festival_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: FestivalModel, festival: Festival) -> None:
        model.name = festival.name
        model.organizer = festival.organizer
        model.date = festival.date
        model.status = festival.status
        model.address = festival.address
        model.category = festival.category

    @staticmethod
    def _to_entity(model: FestivalModel) -> Festival:
        return Festival(
            id=model.id,
            name=model.name,
            organizer=model.organizer,
            date=model.date,
            status=model.status,
            address=model.address,
            category=model.category,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["FestivalRepository"]
