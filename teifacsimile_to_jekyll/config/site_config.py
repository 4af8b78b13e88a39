"""
Jekyll站点配置更新 - 把TEI元数据合并进 _config.yml

写入内容：
- title / tagline: TEI标题声明
- description: 供作者修改的占位描述
- readux_url / readux_pdf_url: digital书目的 digital-edition / pdf 引用
- homepage_image: 首页（封面）的 page 图像
- publication_info: original书目的 title / author / date
- collections / defaults: 卷页与批注两个集合的配置
  （annotations必须排在前面，卷页模板渲染时才能取到批注内容）
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..interfaces import ISiteConfigUpdater, SiteConfigError

if TYPE_CHECKING:
    from ..tei import FacsimileDocument

logger = logging.getLogger(__name__)

SITE_DESCRIPTION = (
    'An annotated digital edition created with '
    '<a href="http://readux.library.emory.edu/">Readux</a>'
)

COLLECTIONS = {
    "annotations": {
        "output": False,
    },
    "volume_pages": {
        "output": True,
        "permalink": "/pages/:path/",
    },
}

DEFAULTS = {
    "scope": {
        "path": "",
        "type": "volume_pages",
    },
    "values": {
        "layout": "volume_pages",
    },
}


def load_site_config(config_path: str | Path) -> dict[str, Any]:
    """读取站点配置"""
    path = Path(config_path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SiteConfigError(f"站点配置不是映射: {path}")
    return data


def dump_site_config(siteconfig: dict[str, Any], config_path: str | Path) -> None:
    """写回站点配置"""
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(siteconfig, f, allow_unicode=True, sort_keys=False)


class SiteConfigUpdater(ISiteConfigUpdater):
    """站点配置更新器实现"""

    def apply(self, doc: FacsimileDocument, siteconfig: dict[str, Any]) -> dict[str, Any]:
        """把TEI元数据合并到配置字典（不做I/O）"""
        title_statement = doc.title_statement
        if title_statement is not None:
            siteconfig["title"] = title_statement.title
            siteconfig["tagline"] = title_statement.subtitle

        siteconfig["description"] = SITE_DESCRIPTION

        bibls = doc.source_bibl
        digital = bibls.get("digital")
        original = bibls.get("original")
        if digital is None or original is None:
            raise SiteConfigError("TEI缺少 digital/original 来源书目")

        references = digital.references
        try:
            siteconfig["readux_url"] = references["digital-edition"].target
            siteconfig["readux_pdf_url"] = references["pdf"].target
        except KeyError as e:
            raise SiteConfigError(f"digital书目缺少引用: {e}") from e

        # 首页（封面）作为主页默认图
        pages = doc.pages
        cover = pages[0].images_by_type.get("page") if pages else None
        if cover is not None:
            siteconfig["homepage_image"] = cover.url
        else:
            logger.warning("首页没有page图像，未设置homepage_image")

        siteconfig["publication_info"] = {
            "title": original.title,
            "author": original.author,
            "date": original.date,
        }
        siteconfig["collections"] = copy.deepcopy(COLLECTIONS)
        siteconfig["defaults"] = copy.deepcopy(DEFAULTS)
        return siteconfig

    def update(self, doc: FacsimileDocument, config_path: Path) -> dict:
        """读取、合并并写回站点配置"""
        siteconfig = load_site_config(config_path)
        self.apply(doc, siteconfig)
        dump_site_config(siteconfig, config_path)
        logger.info(f"已更新站点配置: {config_path}")
        return siteconfig
