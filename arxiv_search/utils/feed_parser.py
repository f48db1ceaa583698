"""
arXiv Atom Feed 解析

把 arXiv API 返回的 Atom XML 转换为 SearchResultPage。

注意：
- 只有 XML 本身格式错误时才抛出 ET.ParseError，其余缺失/异常字段一律取默认值
- 字段查找是表驱动的：每个字段对应一组候选标签（先带命名空间，再裸标签），
  第一个命中的生效；新增可选字段只需要在表中加一行
"""

import xml.etree.ElementTree as ET
from typing import Callable, Optional

from arxiv_search.model.paper_record import PaperRecord
from arxiv_search.model.search_result import SearchResultPage
from arxiv_search.utils.logger import logger

ATOM_NS = "{http://www.w3.org/2005/Atom}"
OPENSEARCH_NS = "{http://a9.com/-/spec/opensearch/1.1/}"
ARXIV_NS = "{http://arxiv.org/schemas/atom}"


def _tags(ns: str, name: str) -> tuple[str, ...]:
    return (f"{ns}{name}", name)


def _text(elem: ET.Element) -> str:
    # 等价于 DOM 的 textContent，包含子元素文本
    return "".join(elem.itertext())


def _collapsed_text(elem: ET.Element) -> str:
    # 源数据会硬换行，把所有空白串压成一个空格
    return " ".join(_text(elem).split())


def _to_int(text: Optional[str]) -> int:
    try:
        return int((text or "").strip())
    except ValueError:
        return 0


# 字段名 -> 候选标签
FEED_METADATA_FIELDS = {
    "total_results": _tags(OPENSEARCH_NS, "totalResults"),
    "start_index": _tags(OPENSEARCH_NS, "startIndex"),
    "items_per_page": _tags(OPENSEARCH_NS, "itemsPerPage"),
}

# 字段名 -> (候选标签, 取值函数, 默认值)
ENTRY_FIELDS: dict[str, tuple[tuple[str, ...], Callable[[ET.Element], str], Optional[str]]] = {
    "id": (_tags(ATOM_NS, "id"), _text, ""),
    "title": (_tags(ATOM_NS, "title"), _collapsed_text, ""),
    "summary": (_tags(ATOM_NS, "summary"), _collapsed_text, ""),
    "published": (_tags(ATOM_NS, "published"), _text, ""),
    "updated": (_tags(ATOM_NS, "updated"), _text, ""),
    # 可选字段缺失时保持 None
    "doi": (_tags(ARXIV_NS, "doi"), _text, None),
    "comment": (_tags(ARXIV_NS, "comment"), _text, None),
    "journal_ref": (_tags(ARXIV_NS, "journal_ref"), _text, None),
}

ENTRY_TAGS = _tags(ATOM_NS, "entry")
AUTHOR_TAGS = _tags(ATOM_NS, "author")
NAME_TAGS = _tags(ATOM_NS, "name")
CATEGORY_TAGS = _tags(ATOM_NS, "category")
LINK_TAGS = _tags(ATOM_NS, "link")


def _find_first(parent: ET.Element, candidates: tuple[str, ...]) -> Optional[ET.Element]:
    for tag in candidates:
        elem = parent.find(tag)
        if elem is not None:
            return elem
    return None


def _find_all(parent: ET.Element, candidates: tuple[str, ...]) -> list[ET.Element]:
    for tag in candidates:
        found = parent.findall(tag)
        if found:
            return found
    return []


def _resolve_links(entry: ET.Element) -> tuple[str, str]:
    """
    解析 PDF 和摘要页链接

    title="pdf" 的链接为 PDF，其余 rel="alternate" 的为摘要页；
    多个链接命中同一规则时，最后一个生效。

    Returns:
        (abstract_url, pdf_url)
    """
    abstract_url = ""
    pdf_url = ""
    for link in _find_all(entry, LINK_TAGS):
        href = link.get("href", "")
        if link.get("title") == "pdf":
            pdf_url = href
        elif link.get("rel") == "alternate":
            abstract_url = href
    return abstract_url, pdf_url


def parse_entry(entry: ET.Element) -> PaperRecord:
    fields = {}
    for name, (candidates, extract, default) in ENTRY_FIELDS.items():
        elem = _find_first(entry, candidates)
        value = extract(elem) if elem is not None else None
        fields[name] = value or default

    authors = []
    for author in _find_all(entry, AUTHOR_TAGS):
        name = _find_first(author, NAME_TAGS)
        if name is not None:
            authors.append(_text(name))

    categories = [cat.get("term", "") for cat in _find_all(entry, CATEGORY_TAGS)]
    abstract_url, pdf_url = _resolve_links(entry)

    return PaperRecord(
        authors=authors,
        categories=categories,
        abstract_url=abstract_url,
        pdf_url=pdf_url,
        **fields,
    )


def parse_arxiv_response(xml_text: str | bytes) -> SearchResultPage:
    """
    解析 arXiv API 返回的 Atom XML

    Args:
        xml_text: 响应正文

    Returns:
        SearchResultPage，entries 为本页论文，total_results 为查询命中总数

    Raises:
        ET.ParseError: XML 格式错误
    """
    root = ET.fromstring(xml_text)

    metadata = {}
    for name, candidates in FEED_METADATA_FIELDS.items():
        elem = _find_first(root, candidates)
        metadata[name] = _to_int(elem.text) if elem is not None else 0

    entries = []
    for entry in _find_all(root, ENTRY_TAGS):
        record = parse_entry(entry)
        logger.debug(f"解析论文: id = {record.id} title = {record.title}")
        entries.append(record)

    logger.debug(
        f"解析完成: 本页 {len(entries)} 篇，总计 {metadata['total_results']} 篇"
    )
    return SearchResultPage(entries=entries, **metadata)
