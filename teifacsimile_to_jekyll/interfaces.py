"""
模块接口契约 - 定义输出层的抽象接口与异常体系

设计原则：
1. TEI核心（tei/）只做内存中的树查询与计算，不做任何I/O
2. 输出层（pipeline/、config/site_config）通过这些接口消费核心对象
3. 便于单元测试和mock替换

使用方式：
    from teifacsimile_to_jekyll.interfaces import IVolumePageWriter

    class MyPageWriter(IVolumePageWriter):
        def write(self, page: FacsimilePage, output_dir: Path) -> Path:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tei import FacsimileDocument, FacsimilePage, Interp, Note


# ============================================================================
# 输出层接口
# ============================================================================

class IVolumePageWriter(ABC):
    """卷页写出器接口 - 每个facsimile页面一个Jekyll文档"""

    @abstractmethod
    def write(self, page: FacsimilePage, output_dir: Path) -> Path:
        """
        写出单个卷页

        Args:
            page: facsimile页面
            output_dir: 卷页集合目录

        Returns:
            生成的文件路径

        Raises:
            InvalidZoneGeometry / OrphanZoneError / DegenerateGeometryError
        """
        ...


class IAnnotationWriter(ABC):
    """批注写出器接口 - 每条note一个Jekyll文档"""

    @abstractmethod
    def write(self, note: Note, output_dir: Path) -> Path:
        """
        写出单条批注

        Args:
            note: TEI批注
            output_dir: 批注集合目录

        Returns:
            生成的文件路径

        Raises:
            MalformedTargetReference / UnresolvedAnnotationTarget
        """
        ...


class ITagWriter(ABC):
    """标签写出器接口 - 标签数据文件与标签页桩文件"""

    @abstractmethod
    def write(self, tags: dict[str, Interp], data_file: Path, tag_dir: Path) -> list[Path]:
        """
        写出标签数据

        Args:
            tags: 标签slug -> interp
            data_file: Jekyll数据文件路径（_data/tags.yml）
            tag_dir: 标签桩页面目录

        Returns:
            生成的文件路径列表（数据文件在首位）
        """
        ...


class ISiteConfigUpdater(ABC):
    """站点配置更新器接口"""

    @abstractmethod
    def update(self, doc: FacsimileDocument, config_path: Path) -> dict:
        """
        用TEI文档的元数据更新Jekyll站点配置

        Args:
            doc: TEI facsimile文档
            config_path: 已存在的 _config.yml

        Returns:
            写回后的配置字典
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class TeiJekyllError(Exception):
    """基础异常"""
    pass


class InvalidZoneGeometry(TeiJekyllError):
    """坐标缺失或非数值"""
    pass


class OrphanZoneError(TeiJekyllError):
    """zone无法追溯到任何页面"""
    pass


class DegenerateGeometryError(TeiJekyllError):
    """参考边长为零，无法计算比例"""
    pass


class UnresolvedAnnotationTarget(TeiJekyllError):
    """没有页面包含批注引用的元素"""
    pass


class MalformedTargetReference(TeiJekyllError):
    """target既不是单元素引用也不是范围引用"""
    pass


class DocumentLoadError(TeiJekyllError):
    """TEI文件无法读取或解析"""
    pass


class SiteConfigError(TeiJekyllError):
    """站点配置不可用"""
    pass
