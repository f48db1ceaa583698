"""
BuildQueryNode - 构建检索参数节点
"""

from pocketflow import Node

from arxiv_search.model.search_filters import SearchRequest
from arxiv_search.utils.arxiv_client import build_request_params
from arxiv_search.utils.logger import logger
from arxiv_search.utils.query_builder import build_search_query


class BuildQueryNode(Node):
    """把 SearchRequest 转换为 search_query 和请求参数"""

    def prep(self, shared):
        request: SearchRequest = shared.get("request")
        if request is None:
            raise ValueError("request not found in shared store")
        return request

    def exec(self, prep_res):
        search_query = build_search_query(prep_res.filters)
        return {
            "search_query": search_query,
            "params": build_request_params(prep_res, search_query),
        }

    def post(self, shared, prep_res, exec_res):
        shared["search_query"] = exec_res["search_query"]
        shared["request_params"] = exec_res["params"]

        logger.debug(f"search_query = {exec_res['search_query']!r}")
        return "default"
