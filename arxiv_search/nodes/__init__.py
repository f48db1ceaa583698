"""
arXiv Search Nodes

单次检索请求的处理节点
"""

from .build_query_node import BuildQueryNode
from .fetch_feed_node import FetchFeedNode
from .parse_feed_node import ParseFeedNode

__all__ = [
    "BuildQueryNode",
    "FetchFeedNode",
    "ParseFeedNode",
]
