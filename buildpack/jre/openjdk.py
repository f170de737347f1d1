"""OpenJDK JRE 组件 — detect / install / configure 三段式入口

用法:
    from buildpack.jre import OpenJdk

    java_opts: list[str] = []
    jdk = OpenJdk(app_dir, java_opts, SystemProperties.from_file(...))
    jdk.detect()      # "jre-openjdk-1.8.0_60"，无副作用
    jdk.install()     # 下载（或命中缓存）并解压到 <app_dir>/.java
    jdk.configure()   # 向 java_opts 追加 -Xmx / -XX:MaxPermSize / -Xss

三个调用互相独立：configure 只依赖系统属性，不要求 JRE 已安装。
"""

from __future__ import annotations

import logging
from pathlib import Path

from buildpack.core.cache import CacheStore, DownloadCache
from buildpack.core.config import Config, get_config
from buildpack.core.properties import SystemProperties
from buildpack.jre.details import JreDetails, resolve_details
from buildpack.jre.identity import jre_id
from buildpack.jre.installer import JreInstaller
from buildpack.jre.options import OptionResolver

logger = logging.getLogger(__name__)


class OpenJdk:
    """为应用选择、安装并配置 OpenJDK JRE"""

    def __init__(
        self,
        app_dir: str | Path,
        java_opts: list[str],
        system_properties: SystemProperties,
        *,
        details: JreDetails | None = None,
        cache: CacheStore | None = None,
        config: Config | None = None,
    ) -> None:
        self.config = config or get_config()
        self.app_dir = Path(app_dir)
        self.java_opts = java_opts
        self.system_properties = system_properties
        self.details = details or resolve_details(system_properties, self.config)
        self._cache = cache

    def detect(self) -> str:
        """返回 jre-<vendor>-<version>；总有返回值，应在确认是 Java 应用后调用"""
        return jre_id(self.details.vendor, self.details.version)

    def install(self) -> Path:
        """下载并解压 JRE，返回安装目录"""
        installer = JreInstaller(self._get_cache(), java_home=self.config.java_home)
        return installer.install(
            self.detect(), self.details.uri, self.app_dir,
            label=f"{self.details.vendor} {self.details.version}",
        )

    def configure(self) -> None:
        """把内存参数按 heap → permgen → stack 顺序追加到 java_opts"""
        opts = OptionResolver(self.system_properties).resolve_all()
        self.java_opts.extend(opts)
        if opts:
            logger.debug("JVM 参数: %s", " ".join(opts))

    def _get_cache(self) -> CacheStore:
        if self._cache is None:
            self._cache = DownloadCache(
                self.config.cache_dir,
                allowed_schemes=self.config.allowed_schemes,
                timeout=self.config.download_timeout,
            )
        return self._cache
