from pydantic import BaseModel
from datetime import date
from typing import List
from .common import Money
from .transaction import Transaction
from ..models.transaction import TransactionCategory

class ChangeDetail(BaseModel):
    value: Money
    change_percent: float

class RangeData(BaseModel):
    start_month: date
    end_month: date
    transactions: List[Transaction]

class CategoryTotal(BaseModel):
    category: TransactionCategory
    amount: Money

class SummaryResult(BaseModel):
    total_balance: ChangeDetail
    income: ChangeDetail
    expenses: ChangeDetail
    investments: ChangeDetail
    range_data: RangeData
    range_by_category: List[CategoryTotal]
