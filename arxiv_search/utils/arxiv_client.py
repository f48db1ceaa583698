"""
ArXiv API Client

封装arXiv检索API的HTTP调用，只请求一次，不做重试
文档: https://info.arxiv.org/help/api/user-manual.html
"""

from typing import Any, Dict, Optional

import requests

from arxiv_search.model.search_filters import SearchRequest
from arxiv_search.model.search_result import SearchResultPage
from arxiv_search.utils.feed_parser import parse_arxiv_response
from arxiv_search.utils.logger import logger
from arxiv_search.utils.query_builder import (
    InvalidSearchError,
    build_search_query,
    has_usable_filter,
)

ARXIV_API_BASE = "https://export.arxiv.org/api/query"


class ArxivAPIError(Exception):
    """arXiv API 返回非 2xx 状态码"""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"ArXiv API error: {status_code} {reason}".rstrip())


def build_request_params(request: SearchRequest, search_query: str) -> Dict[str, Any]:
    """
    构建请求参数，search_query 为空时不发送该参数

    Args:
        request: 搜索请求
        search_query: build_search_query 的输出

    Returns:
        URL 查询参数字典
    """
    params: Dict[str, Any] = {}
    if search_query:
        params["search_query"] = search_query

    params["start"] = request.start
    params["max_results"] = request.max_results
    params["sortBy"] = request.sort_by.value
    params["sortOrder"] = request.sort_order.value
    return params


class ArxivClient:
    """arXiv 检索客户端"""

    def __init__(
        self,
        base_url: str = ARXIV_API_BASE,
        timeout: float = 30,
        user_agent: str = "arxiv-search/0.1",
        session: Optional[requests.Session] = None,
    ):
        """
        初始化客户端

        Args:
            base_url: 检索接口地址
            timeout: 单次请求超时（秒）
            user_agent: 请求头中的 User-Agent
            session: 可选的 requests.Session，默认新建
        """
        if not base_url:
            raise ValueError("ArXiv API base URL cannot be empty")

        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        logger.debug(f"初始化arXiv客户端: {base_url}")

    def fetch(self, params: Dict[str, Any]) -> bytes:
        """
        发送一次GET请求，返回原始 Atom XML

        Raises:
            ArxivAPIError: 非 2xx 状态码
            requests.exceptions.RequestException: 网络请求异常
        """
        logger.debug(f"请求arXiv: {params}")
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"网络请求异常: {str(e)}")
            raise

        if not response.ok:
            logger.error(f"arXiv返回错误状态: {response.status_code} {response.reason}")
            raise ArxivAPIError(response.status_code, response.reason or "")

        return response.content

    def search(self, request: SearchRequest) -> SearchResultPage:
        """
        同步检索：构建查询、请求并解析

        Args:
            request: 搜索请求

        Returns:
            解析后的结果页

        Raises:
            InvalidSearchError: 没有任何可用的搜索条件
        """
        if not has_usable_filter(request.filters):
            raise InvalidSearchError("At least one search parameter is required")

        search_query = build_search_query(request.filters)
        payload = self.fetch(build_request_params(request, search_query))
        return parse_arxiv_response(payload)
