"""
命令行入口 - 把带批注的TEI facsimile导入Jekyll站点

用法：
    teifacsimile-to-jekyll annotated-teifacsimile.xml [-q] [--config teijekyll.yml]

在Jekyll站点根目录下运行（或通过配置的 site_dir 指定）。
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import LoggingConfig, get_config, reload_config
from .interfaces import TeiJekyllError
from .models import ImportJob
from .pipeline import ImportExecutor

logger = logging.getLogger(__name__)


def setup_logging(config: LoggingConfig, quiet: bool = False) -> None:
    """配置根日志；quiet模式只输出告警及以上"""
    level = logging.WARNING if quiet else getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.log_format, force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teifacsimile-to-jekyll",
        description="Import annotated TEI facsimile content into a Jekyll site",
    )
    parser.add_argument("tei_file", type=Path, help="带批注的TEI facsimile文件")
    parser.add_argument("-q", "--quiet", action="store_true", help="只输出告警与错误")
    parser.add_argument("--config", type=Path, default=None, help="运行期配置YAML")
    parser.add_argument("--log-level", default=None, help="日志级别（覆盖配置）")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()
    if args.log_level:
        config.logging.log_level = args.log_level
    setup_logging(config.logging, quiet=args.quiet or config.quiet)

    job = ImportJob(source_file=args.tei_file)
    try:
        ImportExecutor(config).execute(job)
    except (TeiJekyllError, OSError) as e:
        print(f"导入失败: {e}", file=sys.stderr)
        return 1

    for flag in job.flags:
        logger.warning(flag)
    return 0


if __name__ == "__main__":
    sys.exit(main())
