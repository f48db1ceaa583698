"""
ParseFeedNode - 解析Atom响应节点
"""

from pocketflow import Node

from arxiv_search.utils.feed_parser import parse_arxiv_response
from arxiv_search.utils.logger import logger


class ParseFeedNode(Node):
    def prep(self, shared):
        raw_feed = shared.get("raw_feed")
        if raw_feed is None:
            raise ValueError("raw_feed not found in shared store")
        return raw_feed

    def exec(self, prep_res):
        return parse_arxiv_response(prep_res)

    def post(self, shared, prep_res, exec_res):
        """将结果页保存到共享存储"""
        shared["result_page"] = exec_res

        logger.info(
            f"检索完成: 本页 {len(exec_res.entries)} 篇，总计 {exec_res.total_results} 篇"
        )
        return "default"
