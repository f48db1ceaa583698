import pytest

FEED_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/"
      xmlns:arxiv="http://arxiv.org/schemas/atom">
  <title type="html">ArXiv Query: search_query=ti:quantum</title>
  <id>http://arxiv.org/api/cHxbiOdZaP56ODnBPIenZhzg5f8</id>
  <updated>2024-05-01T00:00:00-04:00</updated>
"""

SAMPLE_ENTRY = """
  <entry>
    <id>http://arxiv.org/abs/2405.00001v2</id>
    <updated>2024-05-03T17:59:59Z</updated>
    <published>2024-05-01T12:00:00Z</published>
    <title>Quantum Error Correction
      with   Surface Codes</title>
    <summary>  We study surface codes.
  Results are promising.
</summary>
    <author><name>Alice Smith</name></author>
    <author><name>Bob Jones</name><arxiv:affiliation>MIT</arxiv:affiliation></author>
    <arxiv:doi>10.1000/xyz123</arxiv:doi>
    <arxiv:comment>12 pages, 3 figures</arxiv:comment>
    <arxiv:journal_ref>Phys. Rev. A 1 (2024)</arxiv:journal_ref>
    <link href="http://arxiv.org/abs/2405.00001v2" rel="alternate" type="text/html"/>
    <link title="pdf" href="http://arxiv.org/pdf/2405.00001v2" rel="related" type="application/pdf"/>
    <link title="doi" href="http://dx.doi.org/10.1000/xyz123" rel="related"/>
    <arxiv:primary_category term="quant-ph" scheme="http://arxiv.org/schemas/atom"/>
    <category term="quant-ph" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.IT" scheme="http://arxiv.org/schemas/atom"/>
  </entry>
"""


def build_feed(entries="", total_results="1", start_index="0", items_per_page="10"):
    """拼接一个 arXiv 风格的 Atom feed，传 None 则省略对应的元数据"""
    parts = [FEED_HEADER]
    for tag, value in (
        ("totalResults", total_results),
        ("startIndex", start_index),
        ("itemsPerPage", items_per_page),
    ):
        if value is not None:
            parts.append(f"  <opensearch:{tag}>{value}</opensearch:{tag}>\n")
    parts.append(entries)
    parts.append("</feed>\n")
    return "".join(parts)


def simple_entry(index: int) -> str:
    return f"""
  <entry>
    <id>http://arxiv.org/abs/2405.{index:05d}v1</id>
    <published>2024-05-01T12:00:00Z</published>
    <updated>2024-05-01T12:00:00Z</updated>
    <title>Paper {index}</title>
    <summary>Summary {index}</summary>
  </entry>
"""


@pytest.fixture
def make_feed():
    return build_feed


@pytest.fixture
def sample_entry():
    return SAMPLE_ENTRY


@pytest.fixture
def make_entry():
    return simple_entry
