"""JRE 标识 — 既是 detect 输出的标签，也是下载缓存键"""

from __future__ import annotations


def jre_id(vendor: str, version: str) -> str:
    """返回 ``jre-<vendor>-<version>``，不校验 vendor/version 内容"""
    return f"jre-{vendor}-{version}"
