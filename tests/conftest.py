"""测试共享 fixture — JRE 分发包构造 + 全局配置清理

  make_jre_archive(path, top="jdk1.8.0_60", files={...})
      用 tarfile 生成一个带单一顶层目录的 .tar.gz，模拟真实 JRE 分发包:

      jdk1.8.0_60/
      ├── bin/java
      ├── lib/rt.jar
      └── release
"""

from __future__ import annotations

import io
import tarfile
from collections.abc import Callable
from pathlib import Path

import pytest

from buildpack.core.config import reset_config

DEFAULT_FILES: dict[str, str] = {
    "bin/java": "#!/bin/sh\necho java\n",
    "lib/rt.jar": "rt",
    "release": 'JAVA_VERSION="1.8.0_60"\n',
}


def _make_jre_archive(
    path: Path,
    *,
    top: str = "jdk1.8.0_60",
    files: dict[str, str] | None = None,
    symlinks: dict[str, str] | None = None,
) -> Path:
    """生成 JRE 分发包；files 为 {相对路径: 内容}，symlinks 为 {相对路径: 链接目标}"""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(path, "w:gz") as tf:
        root = tarfile.TarInfo(top)
        root.type = tarfile.DIRTYPE
        root.mode = 0o755
        tf.addfile(root)
        for rel, content in (DEFAULT_FILES if files is None else files).items():
            data = content.encode("utf-8")
            info = tarfile.TarInfo(f"{top}/{rel}")
            info.size = len(data)
            info.mode = 0o755 if rel.startswith("bin/") else 0o644
            tf.addfile(info, io.BytesIO(data))
        for rel, target in (symlinks or {}).items():
            info = tarfile.TarInfo(f"{top}/{rel}")
            info.type = tarfile.SYMTYPE
            info.linkname = target
            tf.addfile(info)
    return path


@pytest.fixture()
def make_jre_archive() -> Callable[..., Path]:
    """JRE 分发包工厂 fixture"""
    return _make_jre_archive


@pytest.fixture(autouse=True)
def _reset_globals():
    """每个用例结束后丢弃全局配置，避免跨用例串扰"""
    yield
    reset_config()
