"""
流水线模块 - 导入编排与输出

子模块：
- stages: 流水线各阶段定义
- executor: 导入执行器
- writers: 卷页/批注/标签写出
"""

from .executor import ImportExecutor
from .stages import IMPORT_STAGES, PipelineStage, StageEnum
from .writers import AnnotationWriter, TagWriter, VolumePageWriter, render_front_matter

__all__ = [
    "PipelineStage",
    "StageEnum",
    "IMPORT_STAGES",
    "ImportExecutor",
    "VolumePageWriter",
    "AnnotationWriter",
    "TagWriter",
    "render_front_matter",
]
