"""
导入执行器 - 编排各阶段执行

职责：
1. 按顺序执行各阶段
2. 更新任务进度
3. 失败隔离：单页/单条批注出错时记录告警并跳过，继续处理其余实体
4. 标签/站点配置阶段失败则整个任务失败

测试要点：
- test_execute_full_import: 完整导入
- test_skip_unresolved_annotation: 无法定位的批注被跳过并记录flag
- test_site_config_missing: 站点配置不存在时跳过该阶段
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import RuntimeConfig, SiteConfigUpdater, get_config
from ..tei import FacsimileDocument, load_tei
from .stages import IMPORT_STAGES, PipelineStage, StageEnum
from .writers import AnnotationWriter, TagWriter, VolumePageWriter, reset_dir

if TYPE_CHECKING:
    from ..models import ImportJob

logger = logging.getLogger(__name__)


class ImportExecutor:
    """TEI -> Jekyll 导入执行器"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()

        self.page_writer = VolumePageWriter()
        self.annotation_writer = AnnotationWriter()
        self.tag_writer = TagWriter()
        self.site_config_updater = SiteConfigUpdater()

    def execute(self, job: ImportJob) -> None:
        """执行导入"""
        job.mark_running()

        try:
            # 中间数据存储
            context: dict = {"doc": None}

            for stage in IMPORT_STAGES:
                self._execute_stage(job, stage, context)

            job.mark_succeeded()

        except Exception as e:
            logger.exception(f"导入失败: {job.source_file}")
            job.mark_failed(str(e))
            raise

    def _execute_stage(self, job: ImportJob, stage: PipelineStage, context: dict) -> None:
        """执行单个阶段"""
        job.progress.stage = stage.name
        job.progress.percent = stage.progress_start
        logger.debug(f"[{job.job_id}] 开始阶段: {stage.name}")

        try:
            if stage.name == StageEnum.LOAD_TEI.value:
                context["doc"] = load_tei(job.source_file)

            elif stage.name == StageEnum.WRITE_VOLUME_PAGES.value:
                self._stage_pages(job, context["doc"])

            elif stage.name == StageEnum.WRITE_ANNOTATIONS.value:
                self._stage_annotations(job, context["doc"])

            elif stage.name == StageEnum.WRITE_TAGS.value:
                self._stage_tags(job, context["doc"])

            elif stage.name == StageEnum.UPDATE_SITE_CONFIG.value:
                self._stage_site_config(job, context["doc"])

        except Exception as e:
            logger.error(f"[{job.job_id}] 阶段失败 {stage.name}: {e}")
            job.add_flag(f"阶段失败:{stage.name}")
            raise

        job.progress.percent = stage.progress_end
        job.progress.message = f"完成阶段: {stage.name}"

    def _stage_pages(self, job: ImportJob, doc: FacsimileDocument) -> None:
        """每个facsimile页面生成一个卷页"""
        logger.info("** Writing volume pages")
        output_dir = self.config.volume_page_dir
        reset_dir(output_dir)

        for page in doc.pages:
            try:
                self.page_writer.write(page, output_dir)
                job.counts.pages_written += 1
            except Exception as e:
                logger.warning(f"卷页生成失败: {page.id}: {e}")
                job.add_flag(f"页面跳过:{page.id}")

    def _stage_annotations(self, job: ImportJob, doc: FacsimileDocument) -> None:
        """每条批注生成一个批注文档"""
        logger.info("** Writing annotations")
        output_dir = self.config.annotation_dir
        reset_dir(output_dir)

        for note in doc.annotations:
            try:
                self.annotation_writer.write(note, output_dir)
                job.counts.annotations_written += 1
            except Exception as e:
                logger.warning(f"批注生成失败: {note.id}: {e}")
                job.add_flag(f"批注跳过:{note.id}")

    def _stage_tags(self, job: ImportJob, doc: FacsimileDocument) -> None:
        """标签数据与桩页面"""
        logger.info("** Generating tags")
        tags = doc.tags
        self.tag_writer.write(tags, self.config.tag_data_path, self.config.tag_dir)
        job.counts.tags_written = len(tags)

    def _stage_site_config(self, job: ImportJob, doc: FacsimileDocument) -> None:
        """更新站点配置（配置文件不存在时跳过）"""
        config_path = self.config.site_config_path
        if not config_path.exists():
            logger.info(f"站点配置不存在，跳过: {config_path}")
            return
        logger.info("** Updating site config")
        self.site_config_updater.update(doc, config_path)
