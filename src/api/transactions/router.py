from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import String, and_, cast, or_
from typing import Annotated, Callable, Optional
from datetime import date
from ...database.db import get_db
from ...models.user import User
from ...models.transaction import Transaction, TransactionStatus, TransactionType
from ...schemas.common import ApiResponse, Page, PageOptions
from ...schemas.summary import SummaryResult
from ...schemas.transaction import (
    Transaction as TransactionSchema,
    TransactionCreate,
    TransactionUpdate
)
from ...services.summary import FinancialSummary, SqlTransactionStore
from ...utils.auth import get_current_user
from ...utils.errors import ApiError
from ...utils.pagination import paginate
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions")

SORTABLE_COLUMNS = ["title", "subtitle", "amount", "type", "category", "date", "created_at"]

def get_clock() -> Callable[[], date]:
    return date.today

def _filtered_query(db: Session, user: User, options: PageOptions):
    query = db.query(Transaction).filter(Transaction.user_id == user.id)

    if options.search:
        pattern = f"%{options.search}%"
        query = query.filter(or_(
            Transaction.title.ilike(pattern),
            Transaction.subtitle.ilike(pattern),
            cast(Transaction.amount, String).ilike(pattern)
        ))

    # unknown type/status values are ignored rather than rejected
    if options.type in {t.value for t in TransactionType}:
        query = query.filter(Transaction.type == TransactionType(options.type))

    if options.status in {s.value for s in TransactionStatus}:
        query = query.filter(Transaction.status == TransactionStatus(options.status))

    return query

def _get_owned(db: Session, user: User, transaction_id: str) -> Transaction:
    transaction = db.query(Transaction).filter(
        and_(Transaction.id == transaction_id, Transaction.user_id == user.id)
    ).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction

def _commit(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action} transaction: {str(e)}")
        raise ApiError(status_code=500, message=f"Failed to {action} transaction")

@router.post("", response_model=ApiResponse[TransactionSchema], status_code=201)
def create_transaction(
    request: TransactionCreate,
    user: User = Depends(get_current_user),
    clock: Callable[[], date] = Depends(get_clock),
    db: Session = Depends(get_db)
):
    values = request.model_dump()
    values["date"] = values["date"] or clock()
    transaction = Transaction(user_id=user.id, **values)

    db.add(transaction)
    _commit(db, "create")
    db.refresh(transaction)

    logger.info(f"Transaction {transaction.id} created for {user.id}")
    return {"error": False, "message": "Transaction created successfully", "data": transaction}

@router.get("/summary", response_model=ApiResponse[SummaryResult])
def get_transactions_summary(
    start_month: Optional[date] = Query(None, description="Window start (YYYY-MM-DD)"),
    end_month: Optional[date] = Query(None, description="Window end (YYYY-MM-DD)"),
    user: User = Depends(get_current_user),
    clock: Callable[[], date] = Depends(get_clock),
    db: Session = Depends(get_db)
):
    summary = FinancialSummary(SqlTransactionStore(db), today=clock)
    result = summary.summarize(user.id, start_month, end_month)

    return {"error": False, "message": "Financial summary generated successfully", "data": result}

@router.get("/upcoming", response_model=ApiResponse[Page[TransactionSchema]])
def get_upcoming_transactions(
    options: Annotated[PageOptions, Query()],
    user: User = Depends(get_current_user),
    clock: Callable[[], date] = Depends(get_clock),
    db: Session = Depends(get_db)
):
    query = _filtered_query(db, user, options).filter(Transaction.date > clock())
    page = paginate(query, Transaction, options, SORTABLE_COLUMNS, TransactionSchema)

    return {"error": False, "message": "Upcoming transactions found", "data": page}

@router.get("/{transaction_id}", response_model=ApiResponse[TransactionSchema])
def get_transaction(
    transaction_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    transaction = _get_owned(db, user, transaction_id)
    return {"error": False, "message": "Transaction found", "data": transaction}

@router.get("", response_model=ApiResponse[Page[TransactionSchema]])
def get_transactions(
    options: Annotated[PageOptions, Query()],
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    page = paginate(_filtered_query(db, user, options), Transaction, options, SORTABLE_COLUMNS, TransactionSchema)
    return {"error": False, "message": "Transactions found", "data": page}

@router.put("/{transaction_id}", response_model=ApiResponse[TransactionSchema])
def update_transaction(
    transaction_id: str,
    request: TransactionUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    transaction = _get_owned(db, user, transaction_id)

    for field, value in request.model_dump(exclude_unset=True).items():
        # subtitle is the only nullable column
        if value is None and field != "subtitle":
            continue
        setattr(transaction, field, value)

    _commit(db, "update")
    db.refresh(transaction)

    logger.info(f"Transaction {transaction.id} updated")
    return {"error": False, "message": "Transaction updated successfully", "data": transaction}

@router.delete("/{transaction_id}", response_model=ApiResponse[None])
def delete_transaction(
    transaction_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    transaction = _get_owned(db, user, transaction_id)

    db.delete(transaction)
    _commit(db, "delete")

    logger.info(f"Transaction {transaction_id} deleted")
    return {"error": False, "message": "Transaction deleted successfully"}
