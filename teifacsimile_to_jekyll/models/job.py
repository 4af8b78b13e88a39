"""
导入任务模型 - 定义一次TEI导入的状态与生命周期
"""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    """任务状态枚举"""
    QUEUED = "queued"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ImportProgress(BaseModel):
    """任务进度"""
    stage: str = "INIT"
    percent: int = 0
    message: str = ""


class ImportCounts(BaseModel):
    """产物计数"""
    pages_written: int = 0
    annotations_written: int = 0
    tags_written: int = 0


class ImportJob(BaseModel):
    """导入任务实体"""
    job_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="UUID")
    source_file: Path

    # 状态
    status: JobStatus = JobStatus.QUEUED
    progress: ImportProgress = Field(default_factory=ImportProgress)
    counts: ImportCounts = Field(default_factory=ImportCounts)

    # 结果
    flags: list[str] = Field(default_factory=list, description="告警标记（被跳过的页面/批注）")
    errors: list[str] = Field(default_factory=list, description="错误信息")

    # 时间戳
    created_at: datetime = Field(default_factory=datetime.now)
    started_at: datetime | None = None
    finished_at: datetime | None = None

    model_config = {"arbitrary_types_allowed": True}

    def mark_running(self, stage: str = "LOAD_TEI") -> None:
        """标记为运行中"""
        self.status = JobStatus.RUNNING
        self.started_at = datetime.now()
        self.progress.stage = stage

    def mark_succeeded(self) -> None:
        """标记为成功"""
        self.status = JobStatus.SUCCEEDED
        self.finished_at = datetime.now()
        self.progress.percent = 100

    def mark_failed(self, error: str) -> None:
        """标记为失败"""
        self.status = JobStatus.FAILED
        self.finished_at = datetime.now()
        self.errors.append(error)

    def add_flag(self, flag: str) -> None:
        """添加告警标记（不中断）"""
        if flag not in self.flags:
            self.flags.append(flag)
