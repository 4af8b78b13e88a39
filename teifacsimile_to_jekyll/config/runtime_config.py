"""
运行期配置 - 输出目录布局与日志参数

职责：
- 提供Jekyll站点内各输出目录/文件名的默认值
- 可从YAML文件（import_options节）加载
- 提供环境变量覆盖机制（TEIJEKYLL_ 前缀，嵌套用 __ 分隔）
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class OutputPathsConfig(BaseModel):
    """站点内输出位置（相对站点根目录）"""

    volume_page_dir: str = "_volume_pages"
    annotation_dir: str = "_annotations"
    site_config_file: str = "_config.yml"
    data_dir: str = "_data"
    tag_file: str = "tags.yml"
    tag_dir: str = "tags"


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    # Jekyll站点根目录
    site_dir: Path = Path(".")
    quiet: bool = False

    paths: OutputPathsConfig = Field(default_factory=OutputPathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "TEIJEKYLL_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        options = data.get("import_options", {})
        extra: dict[str, Any] = {}
        if "site_dir" in options:
            extra["site_dir"] = (path.parent / options["site_dir"]).resolve()
        if "quiet" in options:
            extra["quiet"] = bool(options["quiet"])

        return cls(
            paths=OutputPathsConfig(**cls._extract(options, "paths")),
            logging=LoggingConfig(**cls._extract(options, "logging")),
            **extra,
        )

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key, {})
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    @property
    def volume_page_dir(self) -> Path:
        return self.site_dir / self.paths.volume_page_dir

    @property
    def annotation_dir(self) -> Path:
        return self.site_dir / self.paths.annotation_dir

    @property
    def site_config_path(self) -> Path:
        return self.site_dir / self.paths.site_config_file

    @property
    def tag_data_path(self) -> Path:
        return self.site_dir / self.paths.data_dir / self.paths.tag_file

    @property
    def tag_dir(self) -> Path:
        return self.site_dir / self.paths.tag_dir


# 全局配置实例
_config: RuntimeConfig | None = None

DEFAULT_CONFIG_PATH = Path("teijekyll.yml")


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    _config = RuntimeConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
