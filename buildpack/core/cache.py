"""JRE 分发包下载缓存

职责:
- 以缓存键（JRE 标识）保存下载好的分发包
- 缓存命中检查：同键同来源不重复下载，来源变化时重新下载
- 下载失败时不留下残缺文件

缓存布局:
  <cache_dir>/<key>.cached   分发包本体
  <cache_dir>/<key>.yml      元数据 (uri / 下载时间 / 大小)

重试、校验和与淘汰策略不在此处实现，每次 fetch 只尝试一次。
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import urllib.error
import urllib.request
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Protocol

from buildpack.core.exceptions import DependencyError, ValidationError
from buildpack.utils.net import DEFAULT_SCHEMES, validate_url_scheme
from buildpack.utils.yaml_io import load_yaml, save_yaml

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._+-]*$")
_CHUNK = 64 * 1024


class CacheStore(Protocol):
    """缓存协作方协议 — 安装器只依赖此接口，测试时可注入 mock"""

    def get(
        self, key: str, uri: str, callback: Callable[[BinaryIO], None],
    ) -> None:
        """保证 (key, uri) 对应的本地文件存在，并以打开的文件句柄回调"""
        ...


class DownloadCache:
    """基于本地目录的下载缓存（默认实现）

    缓存键直接用作文件名，只接受字母数字开头、由字母数字和 ``._+-`` 组成的键。
    jre_id() 本身不校验 vendor / version，含空格、'/' 或 '@' 的标识
    在这里以 ValidationError 拒绝，而不是写出缓存目录之外的路径。
    """

    def __init__(
        self,
        cache_dir: str | Path = "",
        *,
        allowed_schemes: Iterable[str] | None = None,
        timeout: int | None = None,
    ) -> None:
        if not cache_dir or allowed_schemes is None or timeout is None:
            from buildpack.core.config import get_config
            cfg = get_config()
            cache_dir = cache_dir or cfg.cache_dir
            if allowed_schemes is None:
                allowed_schemes = cfg.allowed_schemes
            if timeout is None:
                timeout = cfg.download_timeout
        self.cache_dir = Path(cache_dir)
        self.allowed_schemes = frozenset(
            DEFAULT_SCHEMES if allowed_schemes is None else allowed_schemes,
        )
        self.timeout = timeout

    def get(
        self, key: str, uri: str, callback: Callable[[BinaryIO], None],
    ) -> None:
        """保证缓存文件存在，然后以只读二进制句柄调用 callback"""
        path = self.fetch(key, uri)
        with open(path, "rb") as f:
            callback(f)

    def fetch(self, key: str, uri: str) -> Path:
        """返回缓存文件路径，缺失或来源变化时先下载"""
        data_path, meta_path = self._paths(key)
        if self.is_cached(key, uri):
            logger.debug("缓存命中: %s -> %s", key, data_path)
            return data_path

        validate_url_scheme(uri, allowed=self.allowed_schemes, context=f"cache {key}")
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        size = self._download(uri, data_path)
        save_yaml(meta_path, {
            "key": key,
            "uri": uri,
            "size": size,
            "downloaded_at": datetime.now(timezone.utc).isoformat(),
        })
        logger.debug("已缓存: %s (%d 字节) -> %s", key, size, data_path)
        return data_path

    def is_cached(self, key: str, uri: str) -> bool:
        """缓存文件存在且记录的来源与 uri 一致"""
        data_path, meta_path = self._paths(key)
        if not data_path.is_file():
            return False
        return load_yaml(meta_path).get("uri") == uri

    def invalidate(self, key: str) -> bool:
        """删除指定键的缓存，返回是否有文件被删除"""
        removed = False
        for p in self._paths(key):
            if p.exists():
                p.unlink()
                removed = True
        return removed

    def _paths(self, key: str) -> tuple[Path, Path]:
        if not _KEY_PATTERN.match(key):
            raise ValidationError(f"无效的缓存键: '{key}'")
        return self.cache_dir / f"{key}.cached", self.cache_dir / f"{key}.yml"

    def _download(self, uri: str, dest: Path) -> int:
        """下载到临时文件后原子替换，失败时清理临时文件"""
        part = dest.with_name(dest.name + ".part")
        try:
            with urllib.request.urlopen(uri, timeout=self.timeout) as resp:  # nosec B310
                with open(part, "wb") as out:
                    shutil.copyfileobj(resp, out, _CHUNK)
            os.replace(part, dest)
        except (urllib.error.URLError, OSError) as e:
            part.unlink(missing_ok=True)
            raise DependencyError(f"下载失败: {uri} - {e}") from e
        return dest.stat().st_size
