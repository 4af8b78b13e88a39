"""
Facsimile页面 - 页面surface的类型化视图与OCR文本叠加层标记

页面自身也是zone（type=page），另外拥有：
- 图像资源列表（graphic/@rend -> @url）
- 批注高亮计数（文本高亮起始anchor + 图像高亮框）
- 文本行/词/图像高亮框列表

html() 生成的片段（逻辑与readux一致）：
    <div class="ocr-line [ocrtext]" id=... style=... data-vhfontsize=...>
        <div class="ocr-zone ocrtext" style=...><span>词</span></div>
        或 <span>行文本</span>（无词zone时）
    </div>
    <span class="annotator-hl image-annotation-highlight" data-annotation-id=... style=...></span>
"""

from __future__ import annotations

from lxml import etree

from .binding import TeiXmlObject, xml_attr, xml_list
from .layout import compute_style
from .zone import Zone


class Graphic(TeiXmlObject):
    """页面图像资源"""
    rend = xml_attr("@rend")
    url = xml_attr("@url")


class FacsimilePage(Zone):
    """facsimile页面"""

    page_order = xml_attr("@n", as_type=int)
    images = xml_list("t:graphic", as_type=Graphic)
    annotation_count = xml_attr(
        'count(.//t:anchor[@type="text-annotation-highlight-start"]'
        '|.//t:zone[@type="image-annotation-highlight"])',
        as_type=int,
    )
    lines = xml_list('.//t:zone[@type="textLine" or @type="line"]', as_type=Zone)
    # 与 annotation_count 相同的范围：含嵌套在其他zone内的高亮框
    image_highlight_zones = xml_list(
        './/t:zone[@type="image-annotation-highlight"]', as_type=Zone
    )

    @property
    def page(self) -> FacsimilePage:
        return self

    @property
    def images_by_type(self) -> dict[str, Graphic]:
        """按rend索引的图像"""
        return {img.rend: img for img in self.images}

    def markup(self) -> list[etree._Element]:
        """生成OCR叠加层元素"""
        elements: list[etree._Element] = []

        for line in self.lines:
            words = line.word_zones
            classes = "ocr-line" if words else "ocr-line ocrtext"
            line_el = etree.Element("div", {"class": classes})
            if line.id:
                line_el.set("id", line.id)
            _apply_style(line_el, line)

            for word in words:
                word_el = etree.SubElement(line_el, "div", {"class": "ocr-zone ocrtext"})
                _apply_style(word_el, word)
                etree.SubElement(word_el, "span").text = word.text
            if not words:
                etree.SubElement(line_el, "span").text = line.text
            elements.append(line_el)

        for highlight in self.image_highlight_zones:
            span = etree.Element(
                "span", {"class": "annotator-hl image-annotation-highlight"}
            )
            span.set("data-annotation-id", highlight.annotation_id or "")
            _apply_style(span, highlight)
            elements.append(span)

        return elements

    def html(self) -> str:
        """序列化为可嵌入页面的HTML片段"""
        return "\n".join(
            etree.tostring(el, encoding="unicode", method="html")
            for el in self.markup()
        )


def _apply_style(el: etree._Element, zone: Zone) -> None:
    style = compute_style(zone)
    if style.styles:
        el.set("style", style.style_attr())
    for name, value in style.data_attrs().items():
        el.set(name, value)
