"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(sample_doc, temp_dir):
        assert len(sample_doc.pages) == 2
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from lxml import etree

from teifacsimile_to_jekyll.config import RuntimeConfig
from teifacsimile_to_jekyll.tei import TEI_NAMESPACE, TEI_NS, FacsimileDocument, FacsimilePage, Zone


# ============================================================================
# TEI Fixtures
# ============================================================================

SAMPLE_TEI = f"""<TEI xmlns="{TEI_NAMESPACE}">
  <teiHeader>
    <fileDesc>
      <titleStmt>
        <title type="full">
          <title type="main">Sample Volume</title>
          <title type="sub">An annotated edition</title>
        </title>
      </titleStmt>
      <publicationStmt><p>Readux</p></publicationStmt>
      <sourceDesc>
        <bibl type="digital">
          <title>Sample Volume, digital edition</title>
          <author>Readux</author>
          <date>2016</date>
          <ref type="digital-edition" target="https://readux.example.org/books/abc/"/>
          <ref type="pdf" target="https://readux.example.org/books/abc/pdf/"/>
        </bibl>
        <bibl type="original">
          <title>Sample Volume</title>
          <author>Jane Author</author>
          <date>1855</date>
        </bibl>
      </sourceDesc>
    </fileDesc>
  </teiHeader>
  <facsimile>
    <surface type="page" xml:id="rdx_p1" n="1" ulx="0" uly="0" lrx="1000" lry="2000">
      <graphic rend="full" url="https://img.example.org/p1/full.jpg"/>
      <graphic rend="page" url="https://img.example.org/p1/page.jpg"/>
      <graphic rend="thumbnail" url="https://img.example.org/p1/thumb.jpg"/>
      <zone type="textLine" xml:id="line-1" n="1" ulx="100" uly="50" lrx="300" lry="80">
        <line>Hello world</line>
        <zone type="string" xml:id="w1" ulx="120" uly="52" lrx="180" lry="72"><w>Hello</w></zone>
        <zone type="string" xml:id="w2" ulx="200" uly="50" lrx="290" lry="80"><w>world</w></zone>
      </zone>
      <zone type="line" xml:id="line-2" n="2" ulx="100" uly="100" lrx="500" lry="140">
        <line>Second line</line>
      </zone>
      <zone type="image-annotation-highlight" xml:id="highlight-img1" ulx="200" uly="400" lrx="600" lry="800"/>
    </surface>
    <surface type="page" xml:id="rdx_p2" n="2" ulx="0" uly="0" lrx="1200" lry="1600">
      <graphic rend="page" url="https://img.example.org/p2/page.jpg"/>
      <zone type="textLine" xml:id="line-3" ulx="120" uly="160" lrx="720" lry="200">
        <line><anchor type="text-annotation-highlight-start" xml:id="hl-start-a2"/>Third line</line>
        <zone type="string" xml:id="w3" ulx="120" uly="160" lrx="420" lry="200"><w>Third</w></zone>
        <zone type="string" xml:id="w4" ulx="450" uly="170" lrx="720" lry="200"><w>line</w></zone>
      </zone>
    </surface>
  </facsimile>
  <text><body><div><p/></div></body>
    <back>
      <div type="annotations">
        <note type="annotation" xml:id="annotation-a1" resp="#jdoe" target="#w1" ana="#tag-history #tag-people">
          <code lang="markdown">A note on *hello*.</code>
        </note>
        <note type="annotation" xml:id="annotation-a2" resp="#jdoe" target="#range(#w3, #w4)">
          <code lang="markdown">A range note.</code>
        </note>
        <note type="annotation" xml:id="annotation-img1" resp="#asmith" target="#highlight-img1">
          <code lang="markdown">An image note.</code>
        </note>
        <note type="annotation" xml:id="annotation-a4" resp="#jdoe" target="#nowhere">
          <code lang="markdown">Dangling note.</code>
        </note>
      </div>
      <interpGrp type="tags">
        <interp xml:id="tag-history">history</interp>
        <interp xml:id="tag-people">people</interp>
      </interpGrp>
    </back>
  </text>
</TEI>
"""


@pytest.fixture(scope="session")
def sample_tei_xml() -> str:
    """示例TEI文档"""
    return SAMPLE_TEI


@pytest.fixture
def sample_doc(sample_tei_xml: str) -> FacsimileDocument:
    """示例TEI文档视图"""
    return FacsimileDocument.from_string(sample_tei_xml)


@pytest.fixture
def sample_tei_file(temp_dir: Path, sample_tei_xml: str) -> Path:
    """写入临时目录的示例TEI文件"""
    path = temp_dir / "annotated-teifacsimile.xml"
    path.write_text(sample_tei_xml, encoding="utf-8")
    return path


@pytest.fixture
def make_page():
    """构建只含给定内容的单页surface"""

    def _make(inner: str, ulx=0, uly=0, lrx=1000, lry=2000, page_id="p") -> FacsimilePage:
        xml = (
            f'<surface xmlns="{TEI_NAMESPACE}" type="page" xml:id="{page_id}" n="1" '
            f'ulx="{ulx}" uly="{uly}" lrx="{lrx}" lry="{lry}">{inner}</surface>'
        )
        return FacsimilePage(etree.fromstring(xml))

    return _make


@pytest.fixture
def find_zone():
    """按xml:id查找页面中的zone"""

    def _find(page: Zone, zone_id: str) -> Zone:
        el = page.element.xpath(".//t:zone[@xml:id=$zid]", namespaces=TEI_NS, zid=zone_id)[0]
        return Zone(el)

    return _find


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config(temp_dir: Path) -> RuntimeConfig:
    """指向临时站点目录的运行期配置"""
    return RuntimeConfig(site_dir=temp_dir)


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
