"""应用系统属性

从应用目录下的 system.properties 读取用户提供的键值对，
对外只暴露只读的 get_optional() 查询，取值校验由调用方在边界处完成。

支持的 .properties 语法子集:
  - '#' 或 '!' 开头的注释行、空行
  - 键与值之间以 '='、':' 或空白分隔
  - 行尾 '\\' 续行
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"\s*[=:]\s*|\s+")


def _split_entry(line: str) -> tuple[str, str]:
    m = _SEPARATOR.search(line)
    if m is None:
        return line, ""
    return line[:m.start()], line[m.end():]


def parse_properties(text: str) -> dict[str, str]:
    """解析 .properties 文本为字典，后出现的键覆盖先出现的"""
    result: dict[str, str] = {}
    pending: str | None = None
    for raw in text.splitlines():
        segment = raw.lstrip()
        # 注释只看逻辑行的首个非空字符，且注释行永不续行
        if pending is None and (not segment or segment[0] in "#!"):
            continue
        line = (pending or "") + segment
        if _trailing_backslashes(line) % 2 == 1:
            pending = line[:-1]
            continue
        pending = None
        key, value = _split_entry(line)
        result[key] = value
    # 文件末尾的悬空续行按普通行处理
    if pending:
        key, value = _split_entry(pending)
        result[key] = value
    return result


def _trailing_backslashes(line: str) -> int:
    return len(line) - len(line.rstrip("\\"))


class SystemProperties(Mapping[str, str]):
    """只读系统属性存储"""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    @classmethod
    def from_file(cls, path: str | Path) -> SystemProperties:
        """加载 properties 文件，文件不存在时返回空存储"""
        p = Path(path)
        if not p.is_file():
            logger.debug("系统属性文件不存在: %s", p)
            return cls()
        values = parse_properties(p.read_text(encoding="utf-8"))
        logger.debug("已加载 %d 个系统属性: %s", len(values), p)
        return cls(values)

    def get_optional(self, key: str) -> str | None:
        """按键查询，未设置时返回 None（空字符串是有效取值）"""
        return self._values.get(key)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SystemProperties({self._values!r})"
