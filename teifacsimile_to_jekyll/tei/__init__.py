"""
TEI核心 - XPath绑定、zone几何、布局计算、批注target解析

子模块：
- binding: 声明式XPath字段绑定与通用解析器
- zone: zone几何模型
- layout: 百分比定位与字体缩放计算
- page: facsimile页面与OCR叠加层标记
- note: 批注与target解析
- document: 顶层文档视图
"""

from .binding import TEI_NAMESPACE, TEI_NS, Binding, BindingMode, TeiXmlObject, XmlObject
from .document import (
    Bibl,
    FacsimileDocument,
    Interp,
    Reference,
    TitleStatement,
    load_tei,
)
from .layout import REFERENCE_PAGE_SIZE, compute_style, scale_factor
from .note import Note, parse_target
from .page import FacsimilePage, Graphic
from .zone import Zone

__all__ = [
    "TEI_NAMESPACE",
    "TEI_NS",
    "Binding",
    "BindingMode",
    "XmlObject",
    "TeiXmlObject",
    "Zone",
    "FacsimilePage",
    "Graphic",
    "Note",
    "parse_target",
    "REFERENCE_PAGE_SIZE",
    "compute_style",
    "scale_factor",
    "TitleStatement",
    "Reference",
    "Bibl",
    "Interp",
    "FacsimileDocument",
    "load_tei",
]
