from decimal import Decimal
from enum import Enum
from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, PlainSerializer

T = TypeVar("T")

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class ApiResponse(BaseModel, Generic[T]):
    error: bool = False
    message: str
    data: Optional[T] = None

class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

class PageOptions(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    search: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    order: SortOrder = SortOrder.ASC
    order_by: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

class PageMeta(BaseModel):
    page: int
    limit: int
    item_count: int
    page_count: int
    has_previous_page: bool
    has_next_page: bool

    @classmethod
    def build(cls, item_count: int, options: PageOptions) -> "PageMeta":
        page_count = -(-item_count // options.limit)
        return cls(
            page=options.page,
            limit=options.limit,
            item_count=item_count,
            page_count=page_count,
            has_previous_page=options.page > 1,
            has_next_page=options.page < page_count
        )

class Page(BaseModel, Generic[T]):
    data: List[T]
    meta: PageMeta
