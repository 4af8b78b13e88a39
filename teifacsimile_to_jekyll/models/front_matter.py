"""
Jekyll front matter 模型 - 输出文档头部的YAML元数据

对应站点模板所消费的字段：
- VolumePageFrontMatter: _volume_pages/NNNN.html
- AnnotationFrontMatter: _annotations/<id>.md
- TagStubFrontMatter: tags/<slug>.md
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ..tei import FacsimilePage, Interp, Note


class VolumePageFrontMatter(BaseModel):
    """卷页front matter"""
    title: str
    page_order: int
    tei_id: str | None = None
    annotation_count: int = 0
    images: dict[str, str] = Field(default_factory=dict, description="rend -> url")

    @classmethod
    def from_page(cls, page: FacsimilePage) -> VolumePageFrontMatter:
        return cls(
            title=f"Page {page.n}",
            page_order=page.page_order,
            tei_id=page.id,
            annotation_count=page.annotation_count or 0,
            images={img.rend: img.url for img in page.images},
        )


class AnnotationFrontMatter(BaseModel):
    """批注front matter"""
    annotation_id: str
    author: str | None = None
    tei_target: str
    annotated_page: str | None = None
    target: str
    tags: list[str] | None = None
    end_target: str | None = None  # 仅范围引用

    @classmethod
    def from_note(cls, note: Note) -> AnnotationFrontMatter:
        ref = note.target_reference
        return cls(
            annotation_id=note.annotation_id,
            author=note.author,
            tei_target=note.target,
            annotated_page=note.annotated_page.id,
            target=ref.start,
            tags=note.tags,
            end_target=ref.end if ref.is_range else None,
        )


class TagEntry(BaseModel):
    """_data/tags.yml 中单个标签"""
    name: str

    @classmethod
    def from_interp(cls, interp: Interp) -> TagEntry:
        return cls(name=interp.value or "")


class TagStubFrontMatter(BaseModel):
    """标签桩页面front matter"""
    layout: str = "annotation_by_tag"
    tag: str
