"""集中配置管理

构建包的目录约定、默认 JRE 与下载策略集中在 Config 中，
支持从 YAML 文件加载 + 编程式覆盖。
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field

import yaml

from buildpack.core.exceptions import ConfigError
from buildpack.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "configs/buildpack.yml"


@dataclass
class Config:
    """构建包全局配置"""

    # 目录
    cache_dir: str = ".buildpack/cache"
    java_home: str = ".java"                   # 相对应用目录的 JRE 安装位置
    properties_file: str = "system.properties"  # 相对应用目录的系统属性文件

    # 默认 JRE（可被应用的 java.runtime.vendor / java.runtime.version 覆盖）
    jre_vendor: str = "openjdk"
    jre_version: str = "1.8.0_60"
    jre_uri_template: str = (
        "https://download.example.com/jre/{vendor}/{vendor}-{version}.tar.gz"
    )

    # 下载
    allowed_schemes: list[str] = field(default_factory=lambda: ["http", "https"])
    download_timeout: int = 300

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        try:
            data = load_yaml(path)
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"配置文件无效: {path} ({e})") from e
        if not data:
            return cls()
        known = {f for f in cls.__dataclass_fields__ if f != "extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        if "allowed_schemes" in matched and not isinstance(
            matched["allowed_schemes"], list,
        ):
            raise ConfigError(f"allowed_schemes 必须是列表: {path}")
        # 未加引号的 1.10 会被 YAML 解析成浮点 1.1，只能要求用户加引号
        for name in _STR_FIELDS:
            if name in matched and not isinstance(matched[name], str):
                raise ConfigError(
                    f"{name} 必须是字符串 (实际: {matched[name]!r})，"
                    f"版本号等取值请加引号: {path}"
                )
        if "download_timeout" in matched and (
            isinstance(matched["download_timeout"], bool)
            or not isinstance(matched["download_timeout"], int)
        ):
            raise ConfigError(f"download_timeout 必须是整数秒: {path}")
        cfg = cls(**matched)
        cfg.extra = extra
        return cfg

    def to_dict(self) -> dict:
        return asdict(self)


_STR_FIELDS = (
    "cache_dir", "java_home", "properties_file",
    "jre_vendor", "jre_version", "jre_uri_template",
)


# 全局单例，首次 import 时不加载文件；由 CLI 入口显式初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.debug("配置已加载: %s %s", path, _current.to_dict())
    return _current


def reset_config() -> None:
    """丢弃全局配置，下次 get_config() 返回默认值"""
    global _current  # noqa: PLW0603
    _current = None
