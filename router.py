from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.orm import Session
from database import get_db, Transaction, User
from schemas import (
    AdviceRequest,
    AdviceResponse,
    FCMTokenUpdate,
    MonthlyBudget,
    MonthSummary,
    SuccessResponse,
    TransactionCreate,
    TransactionResponse,
)
from auth import get_current_user
from errors import InternalError
from advice import generate_advice
from alerts import month_to_date, send_budget_alert
from periods import local_now, to_local
from datetime import datetime
from typing import Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    transaction: TransactionCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_transaction = Transaction(
        user_id=current_user.id,
        type=transaction.type.value,
        category=transaction.category,
        amount=transaction.amount,
        date=transaction.date or local_now(),
        description=transaction.description,
    )
    db.add(db_transaction)
    db.commit()
    db.refresh(db_transaction)

    # Creation trigger: evaluated after the response, never affects it
    background_tasks.add_task(send_budget_alert, db_transaction.id)
    return db_transaction


@router.get("/transactions", response_model=list[TransactionResponse])
async def get_transactions(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    start, end = to_local(start), to_local(end)
    query = db.query(Transaction).filter(Transaction.user_id == current_user.id)
    if start:
        query = query.filter(Transaction.date >= start)
    if end:
        query = query.filter(Transaction.date <= end)
    return query.order_by(Transaction.date.desc()).all()


@router.delete("/transactions/{transaction_id}")
async def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    transaction = (
        db.query(Transaction)
        .filter(
            Transaction.id == transaction_id, Transaction.user_id == current_user.id
        )
        .first()
    )
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    db.delete(transaction)
    db.commit()
    return {"message": "Transaction deleted successfully"}


@router.put("/budget", response_model=MonthlyBudget)
async def set_monthly_budget(
    budget: MonthlyBudget,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    current_user.monthly_budget = budget.monthlyBudget
    db.commit()
    return budget


@router.get("/summary", response_model=MonthSummary)
async def get_month_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return month_to_date(db, current_user)


@router.post("/generate-ai-advice", response_model=AdviceResponse)
async def generate_ai_advice(
    request: AdviceRequest,
    current_user: User = Depends(get_current_user),
):
    try:
        advice = generate_advice(
            request.expenseAmount,
            request.currentBalance,
            request.monthlyBudget,
            request.category,
        )
    except Exception:
        logger.exception("Error generating AI advice")
        raise InternalError("Error generating advice")
    return AdviceResponse(advice=advice)


@router.post("/update-fcm-token", response_model=SuccessResponse)
async def update_fcm_token(
    payload: FCMTokenUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # Always the caller's own record
    try:
        current_user.fcm_token = payload.fcmToken
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Error updating FCM token")
        raise InternalError("Error updating token")
    return SuccessResponse(success=True)
