from pydantic import BaseModel, Field
from datetime import date as Date, datetime
from typing import Optional
from .common import Money
from ..models.transaction import TransactionCategory, TransactionStatus, TransactionType

class TransactionBase(BaseModel):
    title: str = Field(..., min_length=2, max_length=100)
    subtitle: Optional[str] = Field(None, max_length=150)
    category: TransactionCategory
    date: Optional[Date] = None
    amount: Money = Field(..., ge=0, max_digits=10, decimal_places=2)
    status: TransactionStatus
    type: TransactionType

class TransactionCreate(TransactionBase):
    pass

class TransactionUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=2, max_length=100)
    subtitle: Optional[str] = Field(None, max_length=150)
    category: Optional[TransactionCategory] = None
    date: Optional[Date] = None
    amount: Optional[Money] = Field(None, ge=0, max_digits=10, decimal_places=2)
    status: Optional[TransactionStatus] = None
    type: Optional[TransactionType] = None

class Transaction(TransactionBase):
    id: str
    date: Date
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
