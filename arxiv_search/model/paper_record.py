import re

from pydantic import BaseModel


class PaperRecord(BaseModel):
    id: str = ""
    title: str = ""
    summary: str = ""
    authors: list[str] = []
    published: str = ""
    updated: str = ""
    categories: list[str] = []
    abstract_url: str = ""
    pdf_url: str = ""

    # 可选字段：None 表示源数据中不存在，和空字符串区分开
    doi: str | None = None
    comment: str | None = None
    journal_ref: str | None = None

    @property
    def is_revised(self) -> bool:
        """updated 与 published 原文不同即视为有修订，不做日期解析"""
        return self.updated != self.published

    @property
    def short_id(self) -> str:
        # eg: http://arxiv.org/abs/2108.09112v1 -> 2108.09112v1
        return self.id.rstrip("/").split("/abs/")[-1]

    @property
    def paper_key(self) -> str:
        # eg: 2108.09112v1 -> 2108.09112
        return re.sub(r"v\d+$", "", self.short_id)
