"""
TEI facsimile文档 - 顶层类型化视图

包含：
- 标题声明（主标题/副标题）
- 来源书目（按@type索引：digital / original），各自带按@type索引的外部引用
- 页面列表、批注列表、标签表

使用方式：
    doc = load_tei("annotated-teifacsimile.xml")
    for page in doc.pages:
        page.html()
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from ..interfaces import DocumentLoadError
from .binding import TeiXmlObject, xml_attr, xml_list, xml_map
from .note import Note
from .page import FacsimilePage

logger = logging.getLogger(__name__)

TITLE_STMT_XPATH = "//t:teiHeader/t:fileDesc/t:titleStmt"


class TitleStatement(TeiXmlObject):
    """标题声明"""
    title = xml_attr('.//t:title[@type="main"]')
    subtitle = xml_attr('.//t:title[@type="sub"]')


class Reference(TeiXmlObject):
    """书目外部引用"""
    type = xml_attr("@type")
    target = xml_attr("@target")


class Bibl(TeiXmlObject):
    """来源书目记录"""
    type = xml_attr("@type")
    title = xml_attr("t:title")
    date = xml_attr("t:date")
    author = xml_attr("t:author")
    references = xml_map("t:ref", key_xpath="@type", as_type=Reference)


class Interp(TeiXmlObject):
    """标签（interpGrp中的interp）"""
    id = xml_attr("@xml:id")
    value = xml_attr(".")


class FacsimileDocument(TeiXmlObject):
    """带批注的TEI facsimile文档"""

    title_statement = xml_attr(TITLE_STMT_XPATH, as_type=TitleStatement)
    title = xml_attr(f'{TITLE_STMT_XPATH}/t:title[@type="full"]/t:title[@type="main"]')
    subtitle = xml_attr(f'{TITLE_STMT_XPATH}/t:title[@type="full"]/t:title[@type="sub"]')

    source_bibl = xml_map(
        "//t:teiHeader/t:fileDesc/t:sourceDesc/t:bibl", key_xpath="@type", as_type=Bibl
    )
    pages = xml_list('//t:facsimile/t:surface[@type="page"]', as_type=FacsimilePage)
    annotations = xml_list('//t:note[@type="annotation"]', as_type=Note)
    tags = xml_map(
        '//t:back//t:interpGrp[@type="tags"]/t:interp', key_xpath="@xml:id", as_type=Interp
    )

    @classmethod
    def from_string(cls, xml: str | bytes) -> FacsimileDocument:
        """从XML字符串构建"""
        if isinstance(xml, str):
            xml = xml.encode("utf-8")
        try:
            root = etree.fromstring(xml)
        except etree.XMLSyntaxError as e:
            raise DocumentLoadError(f"TEI解析失败: {e}") from e
        return cls(root)

    @classmethod
    def from_file(cls, path: str | Path) -> FacsimileDocument:
        """从TEI文件构建"""
        path = Path(path)
        if not path.exists():
            raise DocumentLoadError(f"TEI文件不存在: {path}")
        try:
            tree = etree.parse(str(path))
        except (OSError, etree.XMLSyntaxError) as e:
            raise DocumentLoadError(f"TEI解析失败: {path}: {e}") from e
        logger.debug(f"已加载TEI: {path}")
        return cls(tree.getroot())


def load_tei(path: str | Path) -> FacsimileDocument:
    """加载TEI facsimile文档"""
    return FacsimileDocument.from_file(path)
