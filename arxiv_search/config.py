from typing import Literal

import yaml
from pydantic import BaseModel, Field

from arxiv_search.model.search_filters import SortBy, SortOrder


class Config(BaseModel):
    arxiv_api_url: str = "https://export.arxiv.org/api/query"
    request_timeout: float = 30  # 单次请求超时（秒），由传输层负责
    user_agent: str = "arxiv-search/0.1"

    # 分页与排序
    page_size: int = Field(default=10, ge=1)
    default_sort_by: SortBy = SortBy.RELEVANCE
    default_sort_order: SortOrder = SortOrder.DESCENDING

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @classmethod
    def from_yaml(cls, yaml_path: str):
        with open(yaml_path, "r", encoding="utf-8") as f:
            config = yaml.load(f, Loader=yaml.FullLoader)
        return cls(**(config or {}))
