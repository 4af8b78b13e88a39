"""
配置层 - 运行期配置与Jekyll站点配置

职责：
- 加载运行期参数（输出目录布局/日志），支持环境变量覆盖
- 读取并更新Jekyll站点的 _config.yml
"""

from .runtime_config import (
    LoggingConfig,
    OutputPathsConfig,
    RuntimeConfig,
    get_config,
    reload_config,
)
from .site_config import SiteConfigUpdater, dump_site_config, load_site_config

__all__ = [
    "RuntimeConfig",
    "OutputPathsConfig",
    "LoggingConfig",
    "get_config",
    "reload_config",
    "SiteConfigUpdater",
    "load_site_config",
    "dump_site_config",
]
