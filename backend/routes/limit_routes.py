from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_db
from exceptions import DomainError
from models.enums import ExpenseCategory
from schemas import ErrorResponse, LimitRead
from services.limit_service import LimitService

router = APIRouter(
    prefix="/api/v1/limits",
    tags=["Limits"],
    responses={422: {"model": ErrorResponse}},
)

@router.get("", response_model=list[LimitRead])
async def list_limits(account: Optional[str] = None, db: Session = Depends(get_db)):
    try:
        return LimitService.find_all(db, account)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.post("", response_model=LimitRead, status_code=status.HTTP_201_CREATED, responses={400: {"model": ErrorResponse}})
async def set_limit(payload: dict = Body(...), db: Session = Depends(get_db)):
    try:
        return LimitService.set_limit(db, payload)
    except DomainError:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/current", response_model=LimitRead, responses={404: {"model": ErrorResponse}})
async def current_limit(
    account: str = Query(..., min_length=1),
    category: ExpenseCategory = Query(...),
    db: Session = Depends(get_db),
):
    try:
        return LimitService.find_one_by_account(db, account, category)
    except DomainError:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
