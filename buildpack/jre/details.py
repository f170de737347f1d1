"""JRE 分发包元信息

确定本次构建使用的 vendor / version / uri 三元组:
  1. 应用 system.properties 中的 java.runtime.vendor / java.runtime.version
  2. 否则使用 Config 中的默认 JRE
uri 由 Config.jre_uri_template 按 vendor / version 展开。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildpack.core.exceptions import ConfigError, ValidationError

if TYPE_CHECKING:
    from buildpack.core.config import Config
    from buildpack.core.properties import SystemProperties

logger = logging.getLogger(__name__)

VENDOR_KEY = "java.runtime.vendor"
VERSION_KEY = "java.runtime.version"


@dataclass(frozen=True)
class JreDetails:
    """单次构建内只读的 JRE 元信息"""

    vendor: str
    version: str
    uri: str

    def __post_init__(self) -> None:
        missing = [f for f in ("vendor", "version", "uri") if not getattr(self, f)]
        if missing:
            raise ValidationError(
                f"JRE 元信息缺少字段: {', '.join(missing)}", details=missing,
            )


def resolve_details(properties: SystemProperties, config: Config) -> JreDetails:
    """按 系统属性 > 配置默认值 的优先级确定 JRE 元信息"""
    vendor = properties.get_optional(VENDOR_KEY) or config.jre_vendor
    version = properties.get_optional(VERSION_KEY) or config.jre_version
    try:
        uri = config.jre_uri_template.format(vendor=vendor, version=version)
    except (KeyError, IndexError) as e:
        raise ConfigError(
            f"jre_uri_template 含未知占位符 {e}: {config.jre_uri_template}",
        ) from e
    logger.debug("JRE 元信息: vendor=%s version=%s uri=%s", vendor, version, uri)
    return JreDetails(vendor=vendor, version=version, uri=uri)
