"""
数据模型层 - 定义核心输出与输出层的数据结构

- ZoneStyle: zone布局计算结果
- TargetReference: 批注target解析结果
- *FrontMatter: Jekyll文档头部元数据
- ImportJob: 导入任务状态与生命周期
"""

from .front_matter import (
    AnnotationFrontMatter,
    TagEntry,
    TagStubFrontMatter,
    VolumePageFrontMatter,
)
from .job import ImportCounts, ImportJob, ImportProgress, JobStatus
from .style import TargetKind, TargetReference, ZoneStyle

__all__ = [
    "ZoneStyle",
    "TargetKind",
    "TargetReference",
    "VolumePageFrontMatter",
    "AnnotationFrontMatter",
    "TagEntry",
    "TagStubFrontMatter",
    "ImportJob",
    "ImportProgress",
    "ImportCounts",
    "JobStatus",
]
