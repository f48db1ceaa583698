"""
Search Session

持有一次会话内的检索状态（条件、排序、页码、结果、请求中标记、错误），
负责把用户操作转换为检索请求。

并发模型：
- 单线程 asyncio，每个操作最多发出一个请求
- 有请求未完成时，新的检索/翻页/排序操作直接拒绝，不排队
- 每个请求带递增序号，只有最新请求的响应会写入状态，旧响应丢弃
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from arxiv_search.config import Config
from arxiv_search.flow.search_flow import create_search_flow, run_search_flow
from arxiv_search.model.search_filters import (
    SearchFilters,
    SearchRequest,
    SortBy,
    SortOrder,
)
from arxiv_search.model.search_result import SearchResultPage
from arxiv_search.utils.arxiv_client import ArxivClient
from arxiv_search.utils.logger import logger, setup_logger
from arxiv_search.utils.pagination import page_offset, total_pages, visible_pages
from arxiv_search.utils.query_builder import has_usable_filter

NO_FILTER_MESSAGE = "At least one search parameter is required"
NO_RESULTS_MESSAGE = "No results found"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    NO_RESULTS = "no_results"  # 提示信息，不是错误
    ERROR = "error"
    INVALID = "invalid"
    BUSY = "busy"
    IGNORED = "ignored"
    STALE = "stale"


class SearchOutcome(BaseModel):
    status: OutcomeStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (OutcomeStatus.SUCCESS, OutcomeStatus.NO_RESULTS)


class SearchState(BaseModel):
    last_filters: Optional[SearchFilters] = None
    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESCENDING
    current_page: int = 1
    result_page: Optional[SearchResultPage] = None
    in_flight: bool = False
    last_error: Optional[str] = None
    notice: Optional[str] = None
    request_seq: int = 0


class SearchView(BaseModel):
    """提供给展示层的只读快照"""

    model_config = ConfigDict(frozen=True)

    result_page: Optional[SearchResultPage]
    last_filters: Optional[SearchFilters]
    current_page: int
    total_pages: int
    in_flight: bool
    last_error: Optional[str]
    notice: Optional[str]
    sort_by: SortBy
    sort_order: SortOrder

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 1

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def page_controls(self) -> list[int | str]:
        if not self.show_pagination:
            return []
        return visible_pages(self.current_page, self.total_pages)


class SearchSession:
    """检索会话"""

    def __init__(
        self,
        client: ArxivClient,
        page_size: int = 10,
        sort_by: SortBy = SortBy.RELEVANCE,
        sort_order: SortOrder = SortOrder.DESCENDING,
    ):
        """
        Args:
            client: 提供 fetch(params) 的arXiv客户端
            page_size: 每页结果数
            sort_by: 初始排序字段
            sort_order: 初始排序方向
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        self.page_size = page_size
        self._flow = create_search_flow(client)
        self._state = SearchState(sort_by=SortBy(sort_by), sort_order=SortOrder(sort_order))

    @property
    def total_pages(self) -> int:
        if self._state.result_page is None:
            return 0
        return total_pages(self._state.result_page.total_results, self.page_size)

    @property
    def view(self) -> SearchView:
        state = self._state
        return SearchView(
            result_page=state.result_page,
            last_filters=state.last_filters,
            current_page=state.current_page,
            total_pages=self.total_pages,
            in_flight=state.in_flight,
            last_error=state.last_error,
            notice=state.notice,
            sort_by=state.sort_by,
            sort_order=state.sort_order,
        )

    def _busy(self, operation: str) -> SearchOutcome:
        logger.warning(f"已有请求进行中，忽略操作: {operation}")
        return SearchOutcome(status=OutcomeStatus.BUSY, message="A search is already in progress")

    def _invalid(self, message: str) -> SearchOutcome:
        self._state.last_error = message
        logger.warning(message)
        return SearchOutcome(status=OutcomeStatus.INVALID, message=message)

    async def search(self, filters: SearchFilters | Dict[str, Any]) -> SearchOutcome:
        """
        发起新检索，页码重置为1

        失败时清空当前结果；结果为空时返回 NO_RESULTS
        """
        if self._state.in_flight:
            return self._busy("search")

        try:
            if not isinstance(filters, SearchFilters):
                filters = SearchFilters(**filters)
        except (ValidationError, TypeError) as e:
            return self._invalid(f"Invalid search filters: {e}")

        if not has_usable_filter(filters):
            return self._invalid(NO_FILTER_MESSAGE)

        self._state.last_filters = filters
        return await self._execute(filters, page=1, fresh=True)

    async def go_to_page(self, page: int) -> SearchOutcome:
        """
        翻页，沿用上次的搜索条件和当前排序

        失败时保留当前显示的结果和页码
        """
        if self._state.in_flight:
            return self._busy("go_to_page")

        if self._state.last_filters is None or self._state.result_page is None:
            logger.warning(f"没有成功的检索，忽略翻页: {page}")
            return SearchOutcome(status=OutcomeStatus.IGNORED, message="No search to paginate")

        page_count = self.total_pages
        if page < 1 or page > page_count:
            message = f"Page {page} is out of range 1-{page_count}"
            logger.warning(message)
            return SearchOutcome(status=OutcomeStatus.INVALID, message=message)

        return await self._execute(self._state.last_filters, page=page, fresh=False)

    async def change_sort(
        self, sort_by: SortBy | str, sort_order: SortOrder | str | None = None
    ) -> SearchOutcome:
        """修改排序；已有检索时用上次条件从第1页重新检索"""
        if self._state.in_flight:
            return self._busy("change_sort")

        try:
            sort_by = SortBy(sort_by)
            sort_order = SortOrder(sort_order) if sort_order is not None else self._state.sort_order
        except ValueError as e:
            return self._invalid(f"Invalid sort: {e}")

        if sort_by == self._state.sort_by and sort_order == self._state.sort_order:
            return SearchOutcome(status=OutcomeStatus.IGNORED, message="Sort unchanged")

        self._state.sort_by = sort_by
        self._state.sort_order = sort_order
        logger.info(f"排序变更: {sort_by.value} {sort_order.value}")

        if self._state.last_filters is None:
            return SearchOutcome(status=OutcomeStatus.SUCCESS, message="Sort updated")

        return await self.search(self._state.last_filters)

    async def toggle_sort_order(self) -> SearchOutcome:
        return await self.change_sort(self._state.sort_by, self._state.sort_order.flipped())

    async def _execute(self, filters: SearchFilters, page: int, fresh: bool) -> SearchOutcome:
        state = self._state
        request = SearchRequest(
            filters=filters,
            start=page_offset(page, self.page_size),
            max_results=self.page_size,
            sort_by=state.sort_by,
            sort_order=state.sort_order,
        )

        state.request_seq += 1
        seq = state.request_seq
        state.in_flight = True
        state.last_error = None
        state.notice = None
        logger.info(
            f"发起检索 #{seq}: page = {page} start = {request.start} "
            f"sort = {request.sort_by.value} {request.sort_order.value}"
        )

        try:
            result_page = await run_search_flow(self._flow, request)
        except Exception as e:
            if seq != state.request_seq:
                logger.warning(f"丢弃过期请求 #{seq} 的错误: {e}")
                return SearchOutcome(status=OutcomeStatus.STALE)

            message = str(e) or e.__class__.__name__
            logger.error(f"检索失败 #{seq}: {message}")
            state.last_error = message
            if fresh:
                state.result_page = None
                state.current_page = 1
            return SearchOutcome(status=OutcomeStatus.ERROR, message=message)
        finally:
            if seq == state.request_seq:
                state.in_flight = False

        if seq != state.request_seq:
            logger.warning(f"丢弃过期请求 #{seq} 的响应")
            return SearchOutcome(status=OutcomeStatus.STALE)

        state.result_page = result_page
        state.current_page = page

        if result_page.is_empty:
            state.notice = NO_RESULTS_MESSAGE
            logger.info("没有找到符合条件的论文")
            return SearchOutcome(status=OutcomeStatus.NO_RESULTS, message=NO_RESULTS_MESSAGE)

        return SearchOutcome(status=OutcomeStatus.SUCCESS)


def create_search_session(config: Config) -> SearchSession:
    setup_logger(level=config.log_level)

    client = ArxivClient(
        base_url=config.arxiv_api_url,
        timeout=config.request_timeout,
        user_agent=config.user_agent,
    )
    session = SearchSession(
        client,
        page_size=config.page_size,
        sort_by=config.default_sort_by,
        sort_order=config.default_sort_order,
    )

    logger.info(f"检索会话创建完成: {config.arxiv_api_url} page_size = {config.page_size}")
    return session


__all__ = [
    "OutcomeStatus",
    "SearchOutcome",
    "SearchSession",
    "SearchView",
    "create_search_session",
]
