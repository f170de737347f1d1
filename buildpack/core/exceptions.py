"""统一异常体系

所有业务异常继承 BuildpackError，CLI 层据此输出一行友好提示并以非零码退出。
文件系统错误与 tarfile 解压错误不做包装，原样向上传播。
"""

from __future__ import annotations


class BuildpackError(Exception):
    """构建包基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(BuildpackError):
    """配置文件或系统属性取值无效"""

    code = "CONFIG_ERROR"


class DependencyError(BuildpackError):
    """JRE 分发包拉取或缓存失败"""

    code = "DEPENDENCY_ERROR"


class ValidationError(BuildpackError):
    """输入数据校验失败"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details = details or []
