"""
批注 - TEI note 的类型化视图与target解析

target格式：
- 单元素：  #w42
- 文本范围：#range(#p1, #p2)

批注所在页面需要二次查询整棵树，首次访问时计算并缓存在note实例上
（一次转换过程中源树不变）。

测试要点：
- test_parse_single_target / test_parse_range_target
- test_malformed_target
- test_annotated_page_cached
- test_unresolved_target
"""

from __future__ import annotations

import re

from ..interfaces import MalformedTargetReference, UnresolvedAnnotationTarget
from ..models import TargetKind, TargetReference
from .binding import TeiXmlObject, xml_attr
from .page import FacsimilePage

ANNOTATION_ID_PREFIX = "annotation-"

_REF = r"#?([^\s#(),]+)"
RANGE_TARGET = re.compile(rf"^#range\(\s*{_REF}\s*,\s*{_REF}\s*\)$")
SINGLE_TARGET = re.compile(r"^#([^\s#(),]+)$")

# 包含指定xml:id元素的页面
ANNOTATED_PAGE_XPATH = '//t:surface[@type="page"][.//*[@xml:id=$ref]]'


def parse_target(target: str | None) -> TargetReference:
    """解析批注target引用"""
    raw = (target or "").strip()

    match = RANGE_TARGET.match(raw)
    if match:
        return TargetReference(kind=TargetKind.RANGE, start=match.group(1), end=match.group(2))

    match = SINGLE_TARGET.match(raw)
    if match:
        return TargetReference(kind=TargetKind.SINGLE, start=match.group(1))

    raise MalformedTargetReference(f"无法识别的批注target: {target!r}")


class Note(TeiXmlObject):
    """TEI批注"""

    id = xml_attr("@xml:id")
    author = xml_attr("@resp")
    target = xml_attr("@target")
    markdown = xml_attr('.//t:code[@lang="markdown"]')
    ana = xml_attr("@ana")

    def __init__(self, element) -> None:
        super().__init__(element)
        self._annotated_page: FacsimilePage | None = None

    @property
    def target_reference(self) -> TargetReference:
        return parse_target(self.target)

    @property
    def is_range_target(self) -> bool:
        return self.target_reference.is_range

    @property
    def start_target(self) -> str:
        return self.target_reference.start

    @property
    def end_target(self) -> str | None:
        return self.target_reference.end

    @property
    def annotated_page(self) -> FacsimilePage:
        """包含批注起始引用元素的页面（缓存）"""
        if self._annotated_page is None:
            self._annotated_page = self._locate_page(self.start_target)
        return self._annotated_page

    def _locate_page(self, ref: str) -> FacsimilePage:
        result = self.element.xpath(ANNOTATED_PAGE_XPATH, namespaces=self.namespaces, ref=ref)
        if not result:
            raise UnresolvedAnnotationTarget(f"没有页面包含批注引用 #{ref}: {self.id}")
        return FacsimilePage(result[0])

    @property
    def annotation_id(self) -> str | None:
        if self.id is None:
            return None
        return self.id.removeprefix(ANNOTATION_ID_PREFIX)

    @property
    def tags(self) -> list[str] | None:
        """@ana 中引用的标签slug"""
        if self.ana is None:
            return None
        return [tag.removeprefix("#") for tag in self.ana.split()]
