"""Routes for vendor sales."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.sales import list_sales as list_sales_uc, record_sale
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationFanOut
from app.interfaces.api.dependencies import get_fanout
from app.interfaces.api.schemas import SaleCreate, SaleRead

router = APIRouter(prefix="/sales", tags=["sales"])


@router.get("/", response_model=list[SaleRead])
def list_sales(
    vendor_id: int | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[SaleRead]:
    return [SaleRead.model_validate(sale) for sale in list_sales_uc(db, vendor_id=vendor_id)]


@router.post("/", response_model=SaleRead, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_in: SaleCreate,
    db: Session = Depends(get_db),
    fanout: NotificationFanOut = Depends(get_fanout),
) -> SaleRead:
    try:
        sale = record_sale(db, fanout, **sale_in.model_dump())
    except ValueError as exc:
        status_code = status.HTTP_400_BAD_REQUEST
        if str(exc) == "Vendor not found":
            status_code = status.HTTP_404_NOT_FOUND
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
    return SaleRead.model_validate(sale)


__all__ = ["router"]
