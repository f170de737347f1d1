"""JVM 内存参数解析

从系统属性读取内存配置并格式化为启动参数:

  java.heap.size     -> -Xmx<value>
  java.permgen.size  -> -XX:MaxPermSize=<value>
  java.stack.size    -> -Xss<value>

未设置的键不产生参数；取值含任何空白字符时报 ConfigError。
空字符串不含空白，原样格式化（如 "-Xmx"）。
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from buildpack.core.exceptions import ConfigError

if TYPE_CHECKING:
    from buildpack.core.properties import SystemProperties

HEAP_SIZE = "java.heap.size"
PERMGEN_SIZE = "java.permgen.size"
STACK_SIZE = "java.stack.size"

_WHITESPACE = re.compile(r"\s")


class OptionResolver:
    """把系统属性转换为 JVM 启动参数"""

    def __init__(self, properties: SystemProperties) -> None:
        self.properties = properties

    def resolve(
        self, key: str, value_format: str, whitespace_message: str,
    ) -> str | None:
        """解析单个参数

        参数:
            key: 系统属性键
            value_format: 含单个 %s 占位符的参数模板
            whitespace_message: 含单个 %s 占位符的错误提示模板

        返回:
            格式化后的参数；键未设置时返回 None

        异常:
            ConfigError: 取值含空白字符
        """
        value = self.properties.get_optional(key)
        if value is None:
            return None
        if _WHITESPACE.search(value):
            raise ConfigError(f"{whitespace_message % value} ({key})")
        return value_format % value

    def resolve_heap_size(self) -> str | None:
        return self.resolve(
            HEAP_SIZE, "-Xmx%s", "无效的堆大小 '%s'：包含空白字符",
        )

    def resolve_permgen_size(self) -> str | None:
        return self.resolve(
            PERMGEN_SIZE, "-XX:MaxPermSize=%s",
            "无效的 PermGen 大小 '%s'：包含空白字符",
        )

    def resolve_stack_size(self) -> str | None:
        return self.resolve(
            STACK_SIZE, "-Xss%s", "无效的栈大小 '%s'：包含空白字符",
        )

    def resolve_all(self) -> list[str]:
        """按 heap → permgen → stack 的固定顺序返回已设置的参数"""
        candidates = (
            self.resolve_heap_size(),
            self.resolve_permgen_size(),
            self.resolve_stack_size(),
        )
        return [opt for opt in candidates if opt is not None]
