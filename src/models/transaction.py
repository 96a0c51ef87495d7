import enum
import uuid
from datetime import date
from sqlalchemy import Column, String, Numeric, Date, DateTime, Enum, ForeignKey
from sqlalchemy.sql import func
from ..database.db import Base, qualified
from ..config.settings import settings


class TransactionStatus(str, enum.Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"


class TransactionType(str, enum.Enum):
    INCOME = "Income"
    EXPENSE = "Expense"
    TRANSFER = "Transfer"


class TransactionCategory(str, enum.Enum):
    SALARY = "SALARY"
    FREELANCE = "FREELANCE"
    INVESTMENT = "INVESTMENT"
    GIFT = "GIFT"
    FOOD = "FOOD"
    GROCERIES = "GROCERIES"
    TRANSPORT = "TRANSPORT"
    TRAVEL = "TRAVEL"
    HEALTH = "HEALTH"
    INSURANCE = "INSURANCE"
    EDUCATION = "EDUCATION"
    ENTERTAINMENT = "ENTERTAINMENT"
    UTILITIES = "UTILITIES"
    SUBSCRIPTIONS = "SUBSCRIPTIONS"
    SHOPPING = "SHOPPING"
    TAXES = "TAXES"
    RENT = "RENT"
    LOAN = "LOAN"
    CHARITY = "CHARITY"
    OTHER = "OTHER"


def _values(enum_cls):
    return [member.value for member in enum_cls]


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = {"schema": settings.DATABASE_SCHEMA}

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey(f"{qualified('users')}.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(100), nullable=False)
    subtitle = Column(String(150))
    category = Column(Enum(TransactionCategory, name="transaction_category", values_callable=_values), nullable=False)
    date = Column(Date, nullable=False, default=date.today)
    amount = Column(Numeric(10, 2), nullable=False)
    status = Column(Enum(TransactionStatus, name="transaction_status", values_callable=_values), nullable=False)
    type = Column(Enum(TransactionType, name="transaction_type", values_callable=_values), nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp(), onupdate=func.current_timestamp())
