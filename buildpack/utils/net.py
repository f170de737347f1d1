"""网络工具 — URL 安全校验"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlparse

from buildpack.core.exceptions import ValidationError

DEFAULT_SCHEMES = frozenset(("http", "https"))


def validate_url_scheme(
    url: str, *,
    allowed: Iterable[str] = DEFAULT_SCHEMES,
    context: str = "",
) -> None:
    """校验 URL 协议在白名单内，默认仅允许 http/https

    离线构建可通过配置额外放开 file 协议。

    Raises:
        ValidationError: URL scheme 不在白名单内
    """
    schemes = frozenset(s.lower() for s in allowed)
    parsed = urlparse(url)
    if parsed.scheme.lower() not in schemes:
        label = f" ({context})" if context else ""
        raise ValidationError(
            f"不允许的 URL 协议 '{parsed.scheme}'{label}，"
            f"仅支持 {'/'.join(sorted(schemes))}: {url}"
        )
