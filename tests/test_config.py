import asyncio
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from arxiv_search.config import Config
from arxiv_search.flow.search_session import create_search_session
from arxiv_search.model.search_filters import SortBy, SortOrder
from arxiv_search.utils.categories import ARXIV_CATEGORIES, category_label
from arxiv_search.utils.logger import logger

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def test_load_sample_config():
    config = Config.from_yaml(str(CONFIG_DIR / "search.yaml"))

    assert config.arxiv_api_url == "https://export.arxiv.org/api/query"
    assert config.page_size == 10
    assert config.default_sort_by == SortBy.RELEVANCE
    assert config.default_sort_order == SortOrder.DESCENDING


def test_partial_yaml_uses_defaults(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("page_size: 25\ndefault_sort_by: submittedDate\nlog_level: DEBUG\n")

    config = Config.from_yaml(str(path))

    assert config.page_size == 25
    assert config.default_sort_by == SortBy.SUBMITTED_DATE
    assert config.request_timeout == 30


def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert Config.from_yaml(str(path)) == Config()


def test_yaml_with_chinese_comments(tmp_path):
    path = tmp_path / "zh.yaml"
    path.write_text("# 每页结果数\npage_size: 15\n# 日志级别\nlog_level: WARNING\n", encoding="utf-8")

    config = Config.from_yaml(str(path))

    assert config.page_size == 15
    assert config.log_level == "WARNING"


def test_unknown_log_level_is_rejected(tmp_path):
    with pytest.raises(ValidationError):
        Config(log_level="VERBOSE")

    path = tmp_path / "bad.yaml"
    path.write_text("log_level: verbose\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        Config.from_yaml(str(path))


def test_create_search_session():
    config = Config(
        page_size=20,
        default_sort_by=SortBy.LAST_UPDATED_DATE,
        default_sort_order=SortOrder.ASCENDING,
        log_level="DEBUG",
    )

    session = create_search_session(config)

    assert session.page_size == 20
    assert session.view.sort_by == SortBy.LAST_UPDATED_DATE
    assert session.view.sort_order == SortOrder.ASCENDING
    assert session.view.result_page is None
    assert logger.level == logging.DEBUG
    # 空条件不会发请求
    outcome = asyncio.run(session.search({}))
    assert outcome.status.value == "invalid"


def test_category_labels():
    assert ARXIV_CATEGORIES[""] == "All Categories"
    assert category_label("cs.LG") == "Machine Learning"
    assert category_label("astro-ph.GA") == "astro-ph.GA"
