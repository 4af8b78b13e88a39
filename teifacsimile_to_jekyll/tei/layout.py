"""
布局计算 - 把像素坐标zone换算为与分辨率无关的百分比定位与字体缩放

规则（按zone类型）：
1. 文本行(textLine/line)：位置与尺寸相对页面宽高；左对齐；
   font-size = (词平均高度 或 行高) × REFERENCE_PAGE_SIZE / 页面长边；
   data-vhfontsize = 行高占页面高度百分比（供前端按视口高度换算）
2. 词(string)：宽高相对所在行的宽高，left相对行的ulx偏移；无字体、无top
3. 图像高亮框：与文本行相同的位置/尺寸公式，无字体
4. 其他类型：空结果（渲染无操作，不报错）

所有百分比保留两位小数，下游CSS依赖该精度。

测试要点：
- test_line_position: 行位置/尺寸
- test_font_size_from_word_average: 字体缩放
- test_word_relative_to_line: 词相对行定位
- test_degenerate_page: 页面长边为0
- test_unknown_type_empty: 未知类型返回空
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..interfaces import DegenerateGeometryError, OrphanZoneError
from ..models import ZoneStyle
from .zone import IMAGE_HIGHLIGHT_TYPE, LINE_TYPES, WORD_TYPE

if TYPE_CHECKING:
    from .zone import Zone

# 渲染端完整页面的标准尺寸（像素），与显示流水线约定，不从文档推导
REFERENCE_PAGE_SIZE = 1000


def percent(a: float, b: float) -> float:
    """a 占 b 的百分比"""
    if b == 0:
        raise DegenerateGeometryError(f"参考边长为0，无法计算百分比: {a}/{b}")
    return float(a) / float(b) * 100


def fmt_percent(value: float) -> str:
    return "%.2f%%" % value


def scale_factor(page: Zone) -> float:
    """原始页面尺寸到标准显示尺寸的缩放比例"""
    long_edge = page.long_edge
    if long_edge == 0:
        raise DegenerateGeometryError(f"页面长边为0: {page.id}")
    return REFERENCE_PAGE_SIZE / long_edge


def compute_style(zone: Zone) -> ZoneStyle:
    """计算zone的样式与data属性"""
    kind = zone.type

    if kind in LINE_TYPES:
        return _line_style(zone)
    if kind == WORD_TYPE:
        return _word_style(zone)
    if kind == IMAGE_HIGHLIGHT_TYPE:
        return ZoneStyle(styles=_page_box(zone))
    return ZoneStyle()


def _page_box(zone: Zone) -> dict[str, str]:
    """相对页面的绝对定位框"""
    page = zone.page
    page_width = page.width
    page_height = page.height
    return {
        "left": fmt_percent(percent(zone.coordinate("ulx"), page_width)),
        "top": fmt_percent(percent(zone.coordinate("uly"), page_height)),
        "width": fmt_percent(percent(zone.width, page_width)),
        "height": fmt_percent(percent(zone.height, page_height)),
    }


def _line_style(zone: Zone) -> ZoneStyle:
    page = zone.page
    styles = _page_box(zone)
    styles["text-align"] = "left"

    # 有词zone时用词平均高度（mets-alto），否则用行高（abbyy）
    avg_height = zone.avg_height
    font_height = avg_height if avg_height is not None else zone.height
    styles["font-size"] = "%.2fpx" % (font_height * scale_factor(page))

    data = {"vhfontsize": "%.2f" % percent(zone.height, page.height)}
    return ZoneStyle(styles=styles, data=data)


def _word_style(zone: Zone) -> ZoneStyle:
    line = zone.parent
    if line is None:
        raise OrphanZoneError(f"词zone不在任何文本行内: {zone.id}")
    line_width = line.width
    line_height = line.height
    styles = {
        "width": fmt_percent(percent(zone.width, line_width)),
        "height": fmt_percent(percent(zone.height, line_height)),
        "left": fmt_percent(
            percent(zone.coordinate("ulx") - line.coordinate("ulx"), line_width)
        ),
    }
    return ZoneStyle(styles=styles)
