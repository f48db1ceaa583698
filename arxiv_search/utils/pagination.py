"""
Pagination Helpers

页数计算与分页按钮的显示规则，均为纯函数
"""

import math

# 分页按钮中的省略号占位
ELLIPSIS = "..."


def page_offset(page: int, page_size: int) -> int:
    """页码（从1开始）转换为API的 start 偏移量"""
    return (page - 1) * page_size


def total_pages(total_results: int, page_size: int) -> int:
    if total_results <= 0 or page_size <= 0:
        return 0
    return math.ceil(total_results / page_size)


def visible_pages(current_page: int, page_count: int) -> list[int | str]:
    """
    计算需要显示的分页按钮

    规则：
    - 始终显示第1页、最后一页、当前页，以及当前页前后相邻的页
    - 相邻两个显示页之间跳过多于1页时用省略号，只跳过1页时直接显示该页

    Args:
        current_page: 当前页，从1开始
        page_count: 总页数

    Returns:
        页码和 ELLIPSIS 组成的列表，例如 (5, 10) -> [1, "...", 4, 5, 6, "...", 10]
    """
    if page_count <= 0:
        return []

    current_page = min(max(current_page, 1), page_count)
    shown = {1, page_count, current_page - 1, current_page, current_page + 1}
    shown = sorted(p for p in shown if 1 <= p <= page_count)

    controls: list[int | str] = []
    previous = 0
    for page in shown:
        gap = page - previous - 1
        if gap == 1:
            controls.append(previous + 1)
        elif gap > 1:
            controls.append(ELLIPSIS)
        controls.append(page)
        previous = page

    return controls
