"""Financial summary over a date window, compared against the prior year.

The summary buckets an owner's transactions by type and category over an
inclusive ``[start, end]`` window and reports each aggregate next to its
percentage change from the same window one year earlier.
"""
import calendar
import logging
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from sqlalchemy import and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.transaction import Transaction, TransactionCategory, TransactionType
from ..schemas.summary import CategoryTotal, ChangeDetail, RangeData, SummaryResult
from ..schemas.transaction import Transaction as TransactionSchema
from ..utils.errors import ApiError
from ..utils.percentage import percent_change

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class TransactionStore(Protocol):
    def find(self, owner_id: str, start: date, end: date) -> List[Transaction]:
        ...


class SqlTransactionStore:
    """Owner-scoped transaction reads backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def find(self, owner_id: str, start: date, end: date) -> List[Transaction]:
        return self.db.query(Transaction).filter(
            and_(
                Transaction.user_id == owner_id,
                Transaction.date >= start,
                Transaction.date <= end
            )
        ).order_by(Transaction.date.asc()).all()


def default_window(today: date) -> Tuple[date, date]:
    """First day of last month through the last day of next month."""
    if today.month == 1:
        start = date(today.year - 1, 12, 1)
    else:
        start = date(today.year, today.month - 1, 1)

    if today.month == 12:
        end_year, end_month = today.year + 1, 1
    else:
        end_year, end_month = today.year, today.month + 1
    end = date(end_year, end_month, calendar.monthrange(end_year, end_month)[1])
    return start, end


def resolve_window(start: Optional[date], end: Optional[date], today: date) -> Tuple[date, date]:
    default_start, default_end = default_window(today)
    return start or default_start, end or default_end


def previous_year(day: date) -> date:
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        # Feb 29 has no counterpart, roll over to Mar 1
        return date(day.year - 1, 3, 1)


def comparison_window(start: date, end: date) -> Tuple[date, date]:
    return previous_year(start), previous_year(end)


def bucket_by_category(transactions: Iterable[Transaction]) -> Dict[TransactionCategory, Decimal]:
    """Sum amounts per category, in the order categories first appear."""
    buckets: Dict[TransactionCategory, Decimal] = {}
    for tx in transactions:
        buckets[tx.category] = buckets.get(tx.category, ZERO) + _decimal(tx.amount)
    return buckets


def _sum(transactions: Iterable[Transaction], predicate: Callable[[Transaction], bool]) -> Decimal:
    return sum((_decimal(tx.amount) for tx in transactions if predicate(tx)), ZERO)


def aggregate(transactions: List[Transaction]) -> Dict[str, Decimal]:
    income = _sum(transactions, lambda tx: tx.type == TransactionType.INCOME)
    expenses = _sum(transactions, lambda tx: tx.type == TransactionType.EXPENSE)
    investments = _sum(transactions, lambda tx: tx.category == TransactionCategory.INVESTMENT)
    return {
        "total_balance": income - expenses,
        "income": income,
        "expenses": expenses,
        "investments": investments,
    }


class FinancialSummary:
    """Builds a :class:`SummaryResult` for one owner.

    ``today`` is the clock used to resolve a missing window endpoint.
    Transaction status is not filtered: pending and failed entries count.
    """

    def __init__(self, store: TransactionStore, today: Callable[[], date] = date.today):
        self.store = store
        self.today = today

    def summarize(self, owner_id: str, start: Optional[date] = None, end: Optional[date] = None) -> SummaryResult:
        start, end = resolve_window(start, end, self.today())
        last_start, last_end = comparison_window(start, end)

        try:
            current = self.store.find(owner_id, start, end)
            previous = self.store.find(owner_id, last_start, last_end)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load transactions for summary: {str(e)}")
            raise ApiError(status_code=500, message="Failed to build financial summary")

        now_totals = aggregate(current)
        last_totals = aggregate(previous)
        details = {
            name: ChangeDetail(
                value=value,
                change_percent=percent_change(value, last_totals[name])
            )
            for name, value in now_totals.items()
        }

        logger.info(
            f"Summary for {owner_id}: {len(current)} transactions in {start}..{end}, "
            f"{len(previous)} in {last_start}..{last_end}"
        )

        return SummaryResult(
            **details,
            range_data=RangeData(
                start_month=start,
                end_month=end,
                transactions=[TransactionSchema.model_validate(tx) for tx in current]
            ),
            range_by_category=[
                CategoryTotal(category=category, amount=amount)
                for category, amount in bucket_by_category(current).items()
            ]
        )
