"""
FetchFeedNode - 请求arXiv检索接口节点
"""

import asyncio

from pocketflow import AsyncNode

from arxiv_search.utils.arxiv_client import ArxivClient
from arxiv_search.utils.logger import logger


class FetchFeedNode(AsyncNode):
    """发送一次检索请求，失败直接抛出（max_retries 保持默认的1次）"""

    def __init__(self, client: ArxivClient):
        """
        Args:
            client: arXiv 客户端，fetch 为阻塞调用，放到线程中执行
        """
        super().__init__()
        self.client = client

    async def prep_async(self, shared):
        params = shared.get("request_params")
        if params is None:
            raise ValueError("request_params not found in shared store")
        return params

    async def exec_async(self, prep_res):
        return await asyncio.to_thread(self.client.fetch, prep_res)

    async def post_async(self, shared, prep_res, exec_res):
        """保存原始响应"""
        shared["raw_feed"] = exec_res
        logger.debug(f"收到响应 {len(exec_res)} 字节: start = {prep_res.get('start')}")
        return "default"
