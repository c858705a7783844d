from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_db
from exceptions import DomainError
from models.enums import ExpenseCategory
from schemas import ErrorResponse, TransactionRead
from services.transaction_service import TransactionService

router = APIRouter(
    prefix="/api/v1/transactions",
    tags=["Transactions"],
    responses={422: {"model": ErrorResponse}},
)

@router.get("", response_model=list[TransactionRead])
async def list_transactions(db: Session = Depends(get_db)):
    try:
        return TransactionService.find_all(db)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED, responses={400: {"model": ErrorResponse}})
async def create_transaction(payload: dict = Body(...), db: Session = Depends(get_db)):
    try:
        return TransactionService.save(db, payload)
    except DomainError:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/exceeded", response_model=list[TransactionRead], responses={404: {"model": ErrorResponse}})
async def exceeded_transactions(
    account: str = Query(..., min_length=1),
    category: ExpenseCategory = Query(...),
    db: Session = Depends(get_db),
):
    try:
        return TransactionService.find_exceeded(db, account, category)
    except DomainError:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/{transaction_id}", response_model=TransactionRead, responses={404: {"model": ErrorResponse}})
async def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    try:
        return TransactionService.find_one(db, transaction_id)
    except DomainError:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
