"""耗时格式化 — 构建进度行中的 "(1m 3s)" / "(2.4s)" """

from __future__ import annotations

_MINUTE = 60
_HOUR = 60 * _MINUTE


def format_duration(seconds: float) -> str:
    """将秒数格式化为人类可读的耗时

    规则:
        - 超过一小时: "1h 2m"
        - 超过一分钟: "3m 4s"
        - 其余: 保留一位小数，如 "2.4s"、"0.0s"
    """
    remainder = max(seconds, 0.0)
    hours = int(remainder // _HOUR)
    remainder -= hours * _HOUR
    minutes = int(remainder // _MINUTE)
    remainder -= minutes * _MINUTE

    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {int(remainder)}s"
    # 先截断到十分位，避免 59.96 被四舍五入成 "60.0s"
    tenths = int(remainder * 10)
    return f"{tenths // 10}.{tenths % 10}s"
