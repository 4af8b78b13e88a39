"""
布局计算单元测试

每个模块完成后必须运行：pytest tests/unit/test_layout.py -v
"""

import pytest

from teifacsimile_to_jekyll.interfaces import DegenerateGeometryError, OrphanZoneError
from teifacsimile_to_jekyll.models import ZoneStyle
from teifacsimile_to_jekyll.tei import (
    REFERENCE_PAGE_SIZE,
    FacsimileDocument,
    compute_style,
    scale_factor,
)
from teifacsimile_to_jekyll.tei import Zone as CoreZone
from teifacsimile_to_jekyll.tei.binding import TeiXmlObject, xml_attr


class TestScaleFactor:
    """字体缩放比例测试"""

    def test_reference_size(self):
        assert REFERENCE_PAGE_SIZE == 1000

    def test_scale_from_long_edge(self, sample_doc: FacsimileDocument):
        """测试长边2000时比例为0.5"""
        assert scale_factor(sample_doc.pages[0]) == 0.5

    def test_degenerate_page(self, make_page):
        """测试页面长边为0"""
        page = make_page("", lrx=0, lry=0)
        with pytest.raises(DegenerateGeometryError):
            scale_factor(page)


class TestLineStyle:
    """文本行样式测试"""

    def test_line_position(self, sample_doc: FacsimileDocument):
        """测试行位置/尺寸相对页面"""
        style = compute_style(sample_doc.pages[0].lines[0])
        assert style.styles["left"] == "10.00%"
        assert style.styles["top"] == "2.50%"
        assert style.styles["width"] == "20.00%"
        assert style.styles["height"] == "1.50%"
        assert style.styles["text-align"] == "left"

    def test_font_size_from_word_average(self, sample_doc: FacsimileDocument):
        """测试有词zone时按词平均高度缩放：(20+30)/2 × 0.5"""
        style = compute_style(sample_doc.pages[0].lines[0])
        assert style.styles["font-size"] == "12.50px"

    def test_font_size_average_40(self, make_page, find_zone):
        """测试平均词高40、长边2000时字体为20.00px"""
        page = make_page(
            '<zone xml:id="line" type="textLine" ulx="100" uly="50" lrx="300" lry="100">'
            '<zone type="string" ulx="100" uly="50" lrx="150" lry="90"/>'
            '<zone type="string" ulx="160" uly="55" lrx="300" lry="95"/>'
            "</zone>"
        )
        style = compute_style(find_zone(page, "line"))
        assert style.styles["font-size"] == "20.00px"

    def test_font_size_falls_back_to_line_height(self, sample_doc: FacsimileDocument):
        """测试无词zone时用行高：40 × 0.5"""
        style = compute_style(sample_doc.pages[0].lines[1])
        assert style.styles["font-size"] == "20.00px"

    def test_vhfontsize(self, sample_doc: FacsimileDocument):
        """测试视口字体百分比"""
        style = compute_style(sample_doc.pages[0].lines[0])
        assert style.data == {"vhfontsize": "1.50"}

    def test_style_order(self, sample_doc: FacsimileDocument):
        """测试样式输出顺序"""
        style = compute_style(sample_doc.pages[0].lines[0])
        assert list(style.styles) == ["left", "top", "width", "height", "text-align", "font-size"]

    def test_line_type_alias(self, sample_doc: FacsimileDocument):
        """测试 type=line 与 textLine 同样处理"""
        line = sample_doc.pages[0].lines[1]
        assert line.type == "line"
        assert compute_style(line).styles["left"] == "10.00%"

    def test_degenerate_page_line(self, make_page, find_zone):
        """测试零尺寸页面上的行不产生非有限值"""
        page = make_page(
            '<zone xml:id="line" type="textLine" ulx="0" uly="0" lrx="10" lry="10"/>',
            lrx=0,
            lry=0,
        )
        with pytest.raises(DegenerateGeometryError):
            compute_style(find_zone(page, "line"))


class TestWordStyle:
    """词样式测试"""

    def test_word_relative_to_line(self, sample_doc: FacsimileDocument):
        """测试词相对所在行定位"""
        word = sample_doc.pages[0].word_zones[0]
        style = compute_style(word)
        assert style.styles == {"width": "30.00%", "height": "66.67%", "left": "10.00%"}
        assert style.data == {}

    def test_word_left_offset(self, make_page, find_zone):
        """测试ulx=120、行ulx=100宽200时left为10.00%"""
        page = make_page(
            '<zone type="textLine" ulx="100" uly="0" lrx="300" lry="20">'
            '<zone xml:id="w" type="string" ulx="120" uly="0" lrx="160" lry="20"/>'
            "</zone>"
        )
        assert compute_style(find_zone(page, "w")).styles["left"] == "10.00%"

    def test_same_name_zone_class(self, sample_doc: FacsimileDocument):
        """测试其他位置定义同名Zone类不影响词/行查找"""

        class Zone(TeiXmlObject):
            label = xml_attr("@n")

        word = sample_doc.pages[0].word_zones[0]
        assert type(word) is CoreZone
        assert type(word.parent) is CoreZone
        style = compute_style(word)
        assert style.styles == {"width": "30.00%", "height": "66.67%", "left": "10.00%"}

    def test_word_without_line(self, make_page, find_zone):
        """测试不在行内的词"""
        page = make_page('<zone xml:id="w" type="string" ulx="0" uly="0" lrx="10" lry="10"/>')
        with pytest.raises(OrphanZoneError):
            compute_style(find_zone(page, "w"))


class TestOtherStyles:
    """图像高亮框与其他类型测试"""

    def test_image_highlight(self, sample_doc: FacsimileDocument):
        """测试图像高亮框相对页面定位，无字体"""
        style = compute_style(sample_doc.pages[0].image_highlight_zones[0])
        assert style.styles == {
            "left": "20.00%",
            "top": "20.00%",
            "width": "40.00%",
            "height": "20.00%",
        }
        assert style.data == {}

    def test_unknown_type_empty(self, make_page, find_zone):
        """测试未知类型返回空结果"""
        page = make_page('<zone xml:id="z" type="column" ulx="0" uly="0" lrx="10" lry="10"/>')
        style = compute_style(find_zone(page, "z"))
        assert style.is_empty

    def test_page_type_empty(self, sample_doc: FacsimileDocument):
        """测试页面自身不产生样式"""
        assert compute_style(sample_doc.pages[0]).is_empty


class TestZoneStyle:
    """样式模型测试"""

    def test_style_attr(self):
        style = ZoneStyle(styles={"left": "1.00%", "top": "2.00%"})
        assert style.style_attr() == "left:1.00%;top:2.00%"

    def test_data_attrs_prefixed(self):
        style = ZoneStyle(data={"vhfontsize": "1.50"})
        assert style.data_attrs() == {"data-vhfontsize": "1.50"}

    def test_empty(self):
        style = ZoneStyle()
        assert style.is_empty
        assert style.style_attr() == ""
        assert style.data_attrs() == {}
