"""
导入流水线阶段定义

职责：
1. 定义各阶段的名称与进度区间
2. 失败隔离（单页/单条批注失败不影响全局）
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StageEnum(str, Enum):
    """导入阶段枚举"""
    LOAD_TEI = "LOAD_TEI"
    WRITE_VOLUME_PAGES = "WRITE_VOLUME_PAGES"
    WRITE_ANNOTATIONS = "WRITE_ANNOTATIONS"
    WRITE_TAGS = "WRITE_TAGS"
    UPDATE_SITE_CONFIG = "UPDATE_SITE_CONFIG"


@dataclass
class PipelineStage:
    """流水线阶段"""
    name: str
    progress_start: int  # 进度起点（0-100）
    progress_end: int    # 进度终点


IMPORT_STAGES: list[PipelineStage] = [
    PipelineStage(StageEnum.LOAD_TEI.value, 0, 10),
    PipelineStage(StageEnum.WRITE_VOLUME_PAGES.value, 10, 60),
    PipelineStage(StageEnum.WRITE_ANNOTATIONS.value, 60, 90),
    PipelineStage(StageEnum.WRITE_TAGS.value, 90, 95),
    PipelineStage(StageEnum.UPDATE_SITE_CONFIG.value, 95, 100),
]
