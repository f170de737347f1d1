"""jre-buildpack 命令行接口

对应构建平台的三段式生命周期:
  detect  APP_DIR              输出 JRE 标识
  compile APP_DIR [CACHE_DIR]  下载并安装 JRE
  release APP_DIR              输出 JAVA_OPTS (YAML)
"""

import os

import click

from buildpack import __version__
from buildpack.core.config import DEFAULT_CONFIG_FILE, init_config
from buildpack.core.exceptions import BuildpackError
from buildpack.utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "-c", "config_file",
    default=lambda: os.getenv("BUILDPACK_CONFIG", DEFAULT_CONFIG_FILE),
    help="构建包配置文件路径",
)
@click.option("--verbose", "-v", is_flag=True, help="日志附带时间戳与模块名")
def main(config_file: str, verbose: bool) -> None:
    """jre-buildpack - 应用 JRE 选择、安装与内存参数配置"""
    setup_logging(
        level=os.getenv("BUILDPACK_LOG_LEVEL", "INFO"),
        json_output=os.getenv("BUILDPACK_LOG_JSON", "") == "1",
        verbose=verbose,
    )
    try:
        init_config(config_file)
    except BuildpackError as e:
        raise click.ClickException(f"[{e.code}] {e}") from e


# 注册各领域子命令
from buildpack.cli.cmd_jre import register as _reg_jre  # noqa: E402

_reg_jre(main)
