from pocketflow import AsyncFlow

from arxiv_search.model.search_filters import SearchRequest
from arxiv_search.model.search_result import SearchResultPage
from arxiv_search.nodes import BuildQueryNode, FetchFeedNode, ParseFeedNode
from arxiv_search.utils.arxiv_client import ArxivClient
from arxiv_search.utils.logger import logger


def create_search_flow(client: ArxivClient) -> AsyncFlow:
    build_node = BuildQueryNode()
    fetch_node = FetchFeedNode(client)
    parse_node = ParseFeedNode()

    build_node >> fetch_node >> parse_node

    flow = AsyncFlow(start=build_node)

    logger.debug("Search Flow 创建完成")
    return flow


async def run_search_flow(flow: AsyncFlow, request: SearchRequest) -> SearchResultPage:
    """每次请求使用独立的 shared，异常原样抛出由调用方处理"""
    shared = {"request": request}
    await flow.run_async(shared)
    return shared["result_page"]


# 导出函数
__all__ = [
    "create_search_flow",
    "run_search_flow",
]
