"""JRE 分发包安装器

职责:
- 通过缓存协作方保证分发包在本地存在（缺失时下载）
- 清空并重建应用目录下的 JRE 目录
- 解压分发包，去掉每个条目的第一级路径

失败策略:
  文件系统、解压、下载错误一律不在此处捕获，直接向上传播；
  失败后 JRE 目录可能为空或只解压了一部分，重新执行 install 即可恢复。
"""

from __future__ import annotations

import logging
import shutil
import tarfile
import time
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from buildpack.core.cache import CacheStore
from buildpack.utils.duration import format_duration

logger = logging.getLogger(__name__)

DEFAULT_JAVA_HOME = ".java"


def strip_components(tf: tarfile.TarFile, count: int = 1) -> Iterator[tarfile.TarInfo]:
    """逐个产出去掉前 count 级路径的条目，路径被完全去掉的条目直接跳过"""
    for member in tf.getmembers():
        parts = Path(member.name).parts[count:]
        if not parts:
            continue
        changes: dict[str, str] = {"name": "/".join(parts)}
        # 硬链接目标同样是归档内路径，需要同步去掉前缀
        if member.islnk():
            link_parts = Path(member.linkname).parts[count:]
            changes["linkname"] = "/".join(link_parts)
        yield member.replace(**changes, deep=False)


class JreInstaller:
    """把缓存中的 JRE 分发包安装到应用目录"""

    def __init__(self, cache: CacheStore, java_home: str = DEFAULT_JAVA_HOME) -> None:
        self.cache = cache
        self.java_home = java_home

    def install(
        self, identity: str, uri: str, app_dir: str | Path, *, label: str = "",
    ) -> Path:
        """下载（或命中缓存）并解压 JRE，返回安装目录"""
        target = Path(app_dir) / self.java_home
        start = time.monotonic()
        logger.debug("请求分发包: %s <- %s", identity, uri)

        def _on_ready(file: BinaryIO) -> None:
            logger.info(
                "-----> Downloading %s JRE from %s (%s)",
                label or identity, uri, format_duration(time.monotonic() - start),
            )
            self.expand(file, target)

        self.cache.get(identity, uri, _on_ready)
        return target

    def expand(self, file: BinaryIO, target: Path) -> None:
        """清空 target 后解压分发包，去掉第一级目录"""
        start = time.monotonic()

        if target.is_symlink() or target.is_file():
            target.unlink()
        elif target.exists():
            shutil.rmtree(target)
        target.mkdir(parents=True)

        with tarfile.open(fileobj=file, mode="r:*") as tf:
            tf.extractall(  # noqa: S202
                path=str(target), members=strip_components(tf), filter="data",
            )

        logger.info(
            "-----> Expanding JRE to %s (%s)",
            self.java_home, format_duration(time.monotonic() - start),
        )
