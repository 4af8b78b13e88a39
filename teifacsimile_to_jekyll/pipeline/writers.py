"""
Jekyll文档写出器 - front matter + 正文

文件格式：
    ---
    <YAML front matter>
    ---
    <正文：卷页为OCR叠加层HTML，批注为markdown原文>

测试要点：
- test_volume_page_filename: 卷页按页码补零命名（0001.html）
- test_annotation_front_matter: 批注front matter字段
- test_range_end_target: 范围引用写出end_target
- test_tag_files: 标签数据文件与桩页面
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..interfaces import IAnnotationWriter, ITagWriter, IVolumePageWriter
from ..models import AnnotationFrontMatter, TagEntry, TagStubFrontMatter, VolumePageFrontMatter

if TYPE_CHECKING:
    from ..tei import FacsimilePage, Interp, Note

logger = logging.getLogger(__name__)


def render_front_matter(data: dict[str, Any], body: str = "") -> str:
    """渲染 front matter + 正文"""
    front_matter = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    return f"---\n{front_matter}---\n{body}"


def reset_dir(path: Path) -> None:
    """清空并重建输出目录"""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)


class VolumePageWriter(IVolumePageWriter):
    """卷页写出器实现"""

    def filename(self, page: FacsimilePage) -> str:
        return "%04d.html" % page.page_order

    def write(self, page: FacsimilePage, output_dir: Path) -> Path:
        front_matter = VolumePageFrontMatter.from_page(page)
        # 先生成正文，几何错误在写文件前抛出
        body = page.html()
        path = output_dir / self.filename(page)
        path.write_text(
            render_front_matter(front_matter.model_dump(exclude_none=True), body),
            encoding="utf-8",
        )
        logger.info(f"Page {page.n}")
        return path


class AnnotationWriter(IAnnotationWriter):
    """批注写出器实现"""

    def write(self, note: Note, output_dir: Path) -> Path:
        front_matter = AnnotationFrontMatter.from_note(note)
        path = output_dir / f"{note.id}.md"
        path.write_text(
            render_front_matter(front_matter.model_dump(exclude_none=True), note.markdown or ""),
            encoding="utf-8",
        )
        logger.info(f"Annotation {note.annotation_id}")
        return path


class TagWriter(ITagWriter):
    """标签写出器实现"""

    def write(self, tags: dict[str, Interp], data_file: Path, tag_dir: Path) -> list[Path]:
        # 数据文件：slug -> {name}
        tag_data = {slug: TagEntry.from_interp(interp).model_dump() for slug, interp in tags.items()}
        data_file.parent.mkdir(parents=True, exist_ok=True)
        with open(data_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(tag_data, f, allow_unicode=True, sort_keys=False)
        written = [data_file]

        # 每个标签一个桩页面
        tag_dir.mkdir(parents=True, exist_ok=True)
        for slug in tags:
            stub = tag_dir / f"{slug}.md"
            stub.write_text(
                render_front_matter(TagStubFrontMatter(tag=slug).model_dump()),
                encoding="utf-8",
            )
            written.append(stub)

        logger.info(f"已生成 {len(tags)} 个标签")
        return written
