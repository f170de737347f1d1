"""CLI — JRE 生命周期命令"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
import yaml

from buildpack.core.config import get_config
from buildpack.core.exceptions import BuildpackError
from buildpack.core.properties import SystemProperties
from buildpack.jre.openjdk import OpenJdk


def register(group: click.Group) -> None:
    group.add_command(detect)
    group.add_command(compile_)
    group.add_command(release)


@contextmanager
def _build_step() -> Iterator[None]:
    """业务异常转为 ClickException：一行提示 + 非零退出码"""
    try:
        yield
    except BuildpackError as e:
        raise click.ClickException(f"[{e.code}] {e}") from e


def _open_jdk(app_dir: str, java_opts: list[str] | None = None) -> OpenJdk:
    cfg = get_config()
    props = SystemProperties.from_file(Path(app_dir) / cfg.properties_file)
    return OpenJdk(app_dir, java_opts if java_opts is not None else [], props, config=cfg)


_APP_DIR = click.Path(exists=True, file_okay=False)


@click.command()
@click.argument("app_dir", type=_APP_DIR)
def detect(app_dir: str) -> None:
    """输出应用需要的 JRE 标识"""
    with _build_step():
        click.echo(_open_jdk(app_dir).detect())


@click.command(name="compile")
@click.argument("app_dir", type=_APP_DIR)
@click.argument("cache_dir", required=False, default=None)
def compile_(app_dir: str, cache_dir: str | None) -> None:
    """下载（或命中缓存）并解压 JRE 到应用目录"""
    if cache_dir:
        get_config().cache_dir = cache_dir
    with _build_step():
        _open_jdk(app_dir).install()


@click.command()
@click.argument("app_dir", type=_APP_DIR)
def release(app_dir: str) -> None:
    """输出 JVM 内存参数（YAML: config_vars.JAVA_OPTS）"""
    java_opts: list[str] = []
    with _build_step():
        _open_jdk(app_dir, java_opts).configure()
    doc = {"config_vars": {"JAVA_OPTS": " ".join(java_opts)}}
    click.echo(yaml.safe_dump(doc, default_flow_style=False, sort_keys=False), nl=False)
