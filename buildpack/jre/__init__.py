"""JRE 组件模块

拆分说明:
- identity.py: JRE 标识 / 缓存键
- details.py: vendor / version / uri 元信息
- installer.py: 缓存拉取 + 解压安装
- options.py: JVM 内存参数解析
- openjdk.py: detect / install / configure 编排入口
"""

from buildpack.jre.details import JreDetails, resolve_details
from buildpack.jre.identity import jre_id
from buildpack.jre.installer import JreInstaller
from buildpack.jre.openjdk import OpenJdk
from buildpack.jre.options import OptionResolver

__all__ = [
    "JreDetails",
    "JreInstaller",
    "OpenJdk",
    "OptionResolver",
    "jre_id",
    "resolve_details",
]
