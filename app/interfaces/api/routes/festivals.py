"""Routes for festival management."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.festivals import (
    create_festival as create_festival_uc,
    delete_festival as delete_festival_uc,
    get_festival as get_festival_uc,
    list_festivals as list_festivals_uc,
    update_festival as update_festival_uc,
)
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationFanOut
from app.interfaces.api.dependencies import get_fanout
from app.interfaces.api.schemas import FestivalCreate, FestivalRead, FestivalUpdate

router = APIRouter(prefix="/festivals", tags=["festivals"])


@router.get("/", response_model=list[FestivalRead])
def list_festivals(
    festival_status: str | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
) -> list[FestivalRead]:
    return [
        FestivalRead.model_validate(festival)
        for festival in list_festivals_uc(db, status=festival_status)
    ]


@router.get("/{festival_id}", response_model=FestivalRead)
def get_festival(festival_id: int, db: Session = Depends(get_db)) -> FestivalRead:
    try:
        festival = get_festival_uc(db, festival_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return FestivalRead.model_validate(festival)


@router.post("/", response_model=FestivalRead, status_code=status.HTTP_201_CREATED)
def create_festival(
    festival_in: FestivalCreate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> FestivalRead:
    try:
        festival = create_festival_uc(db, fanout, **festival_in.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return FestivalRead.model_validate(festival)


@router.put("/{festival_id}", response_model=FestivalRead)
def update_festival(
    festival_id: int,
    festival_in: FestivalUpdate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> FestivalRead:
    try:
        festival = update_festival_uc(
            db, fanout, festival_id=festival_id, **festival_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == "Festival not found":
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return FestivalRead.model_validate(festival)


@router.delete("/{festival_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_festival(
    festival_id: int,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> Response:
    try:
        delete_festival_uc(db, fanout, festival_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
