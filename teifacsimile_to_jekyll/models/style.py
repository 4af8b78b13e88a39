"""
布局与引用结果模型 - 核心计算的输出值对象

- ZoneStyle: zone的CSS样式与data属性（百分比定位、字体缩放）
- TargetReference: 批注target解析结果
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ZoneStyle(BaseModel):
    """zone渲染属性（键顺序即输出顺序）"""
    styles: dict[str, str] = Field(default_factory=dict, description="CSS样式")
    data: dict[str, str] = Field(default_factory=dict, description="data-*属性")

    @property
    def is_empty(self) -> bool:
        return not self.styles and not self.data

    def style_attr(self) -> str:
        """拼接为 style 属性值"""
        return ";".join(f"{k}:{v}" for k, v in self.styles.items())

    def data_attrs(self) -> dict[str, str]:
        """data属性（带 data- 前缀）"""
        return {f"data-{k}": v for k, v in self.data.items()}


class TargetKind(str, Enum):
    """批注target类型"""
    SINGLE = "single"  # #id
    RANGE = "range"    # #range(#start, #end)


class TargetReference(BaseModel):
    """批注target解析结果"""
    kind: TargetKind
    start: str = Field(..., description="起始元素xml:id")
    end: str | None = Field(None, description="结束元素xml:id（仅范围引用）")

    @property
    def is_range(self) -> bool:
        return self.kind is TargetKind.RANGE
