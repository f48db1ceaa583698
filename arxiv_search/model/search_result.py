from pydantic import BaseModel

from arxiv_search.model.paper_record import PaperRecord


class SearchResultPage(BaseModel):
    entries: list[PaperRecord] = []
    total_results: int = 0  # 符合查询的总数，分页以此为准
    start_index: int = 0
    items_per_page: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.entries
