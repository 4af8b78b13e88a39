"""
Zone几何模型 - 页面上矩形区域（页/行/词/图像高亮框）的类型化视图

坐标为源图像像素空间（浮点）：
- 左上 (ulx, uly)，右下 (lrx, lry)
- width = lrx - ulx, height = lry - uly, long_edge = max(width, height)
- 不校验 ulx <= lrx：坐标颠倒时尺寸为负值，照常参与计算

parent / page 不保存对象指针，每次访问都从源树向上查找。
"""

from __future__ import annotations

from statistics import mean
from typing import TYPE_CHECKING

from ..interfaces import InvalidZoneGeometry, OrphanZoneError
from .binding import TeiXmlObject, xml_attr, xml_list

if TYPE_CHECKING:
    from .page import FacsimilePage

# zone/@type 取值
PAGE_TYPE = "page"
LINE_TYPES = ("textLine", "line")
WORD_TYPE = "string"
IMAGE_HIGHLIGHT_TYPE = "image-annotation-highlight"


class Zone(TeiXmlObject):
    """TEI zone（页面surface也具有相同的几何属性）"""

    id = xml_attr("@xml:id")
    n = xml_attr("@n")
    type = xml_attr("@type")
    ulx = xml_attr("@ulx", as_type=float)
    uly = xml_attr("@uly", as_type=float)
    lrx = xml_attr("@lrx", as_type=float)
    lry = xml_attr("@lry", as_type=float)
    text = xml_attr("t:line|t:w")
    word_zones = xml_list('.//t:zone[@type="string"]', as_type="Zone")

    #: 最近的祖先zone
    parent = xml_attr("ancestor::t:zone[1]", as_type="Zone")
    #: 所在页面
    enclosing_page = xml_attr(
        'ancestor::t:surface[@type="page"][1]', as_type=f"{__package__}.page.FacsimilePage"
    )

    @property
    def page(self) -> FacsimilePage:
        page = self.enclosing_page
        if page is None:
            raise OrphanZoneError(f"zone不在任何页面内: {self.id or self.element.tag}")
        return page

    def coordinate(self, name: str) -> float:
        """取必需坐标，缺失时报错"""
        value = self.resolve(name)
        if value is None:
            raise InvalidZoneGeometry(f"zone缺少坐标 @{name}: {self.id or self.element.tag}")
        return value

    @property
    def width(self) -> float:
        return self.coordinate("lrx") - self.coordinate("ulx")

    @property
    def height(self) -> float:
        return self.coordinate("lry") - self.coordinate("uly")

    @property
    def long_edge(self) -> float:
        return max(self.width, self.height)

    @property
    def avg_height(self) -> float | None:
        """词zone的平均高度（如文本行）；没有词zone时为None"""
        words = self.word_zones
        if not words:
            return None
        return mean(w.height for w in words)

    @property
    def annotation_id(self) -> str | None:
        """图像高亮框对应的批注id"""
        if self.type != IMAGE_HIGHLIGHT_TYPE or self.id is None:
            return None
        return self.id.removeprefix("highlight-")
