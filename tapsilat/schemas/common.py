from enum import Enum
from typing import Generic, TypeVar
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class TapsilatModel(BaseModel):
    """API modelleri için taban: bilinmeyen alanlar yok sayılır."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Currency(str, Enum):
    TRY = "TRY"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class ApiResponse(TapsilatModel, Generic[T]):
    """API zarfı: {"success": ..., "data": ..., "message": ...}"""
    success: bool = False
    data: T | None = None
    message: str | None = None
    errors: list[str] | None = None


class PaginationParams(TapsilatModel):
    page: int | None = None
    per_page: int | None = None

    def as_query(self) -> str:
        return urlencode(self.model_dump(exclude_none=True))


class PaginationInfo(TapsilatModel):
    current_page: int
    per_page: int
    total: int
    total_pages: int


class PaginatedResponse(TapsilatModel, Generic[T]):
    data: list[T]
    pagination: PaginationInfo
