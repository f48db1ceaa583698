import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class SortBy(str, Enum):
    RELEVANCE = "relevance"
    SUBMITTED_DATE = "submittedDate"
    LAST_UPDATED_DATE = "lastUpdatedDate"


class SortOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "SortOrder":
        if self is SortOrder.DESCENDING:
            return SortOrder.ASCENDING
        return SortOrder.DESCENDING


class SearchFilters(BaseModel):
    """用户输入的搜索条件，所有字段均可为空"""

    query: str = ""  # 全字段检索
    title: str = ""
    author: str = ""
    abstract: str = ""
    category: str = ""

    # 日期范围只随条件保存，不会发给API
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None

    @model_validator(mode="after")
    def check_date_range(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError(
                f"start_date {self.start_date} is after end_date {self.end_date}"
            )
        return self


class SearchRequest(BaseModel):
    filters: SearchFilters
    start: int = Field(default=0, ge=0)
    max_results: int = Field(default=10, ge=1)
    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESCENDING
