"""
Query Builder

把结构化的搜索条件转换成arXiv API的 search_query 语法
"""

from arxiv_search.model.search_filters import SearchFilters

# (字段名, arXiv字段前缀)，顺序即子句顺序
FIELD_PREFIXES = (
    ("query", "all"),
    ("title", "ti"),
    ("author", "au"),
    ("abstract", "abs"),
    ("category", "cat"),
)


class InvalidSearchError(ValueError):
    """搜索条件为空，拒绝发出请求"""


def build_search_query(filters: SearchFilters) -> str:
    """
    构建 search_query 字符串

    每个非空字段生成一个 `前缀:原值` 子句，用 AND 连接。
    值不做引号包裹或转义，原样透传。日期范围和排序不在此处处理。

    Args:
        filters: 搜索条件

    Returns:
        查询字符串，全部字段为空时返回空字符串
    """
    parts = []
    for field, prefix in FIELD_PREFIXES:
        value = getattr(filters, field)
        if value:
            parts.append(f"{prefix}:{value}")

    return " AND ".join(parts)


def has_usable_filter(filters: SearchFilters) -> bool:
    return bool(build_search_query(filters)) or bool(filters.category)
