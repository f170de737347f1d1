"""jre-buildpack — 应用构建阶段的 JRE 选择、下载、安装与内存参数配置"""

__version__ = "0.1.0"
