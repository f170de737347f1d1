"""JVM 内存参数解析测试"""

from __future__ import annotations

import pytest

from buildpack.core.exceptions import ConfigError
from buildpack.core.properties import SystemProperties
from buildpack.jre.options import HEAP_SIZE, PERMGEN_SIZE, STACK_SIZE, OptionResolver


def _resolver(**values: str) -> OptionResolver:
    keys = {"heap": HEAP_SIZE, "permgen": PERMGEN_SIZE, "stack": STACK_SIZE}
    return OptionResolver(SystemProperties({keys[k]: v for k, v in values.items()}))


class TestResolve:
    def test_absent_key_returns_none(self) -> None:
        assert _resolver().resolve("java.heap.size", "-Xmx%s", "bad '%s'") is None

    def test_value_formatted(self) -> None:
        assert _resolver(heap="512m").resolve("java.heap.size", "-Xmx%s", "bad '%s'") == "-Xmx512m"

    def test_empty_value_accepted_verbatim(self) -> None:
        assert _resolver(heap="").resolve_heap_size() == "-Xmx"

    @pytest.mark.parametrize("value", ["1 m", " 512m", "512m ", "1\tg", "1\nm", "2 g"])
    def test_whitespace_rejected(self, value: str) -> None:
        with pytest.raises(ConfigError) as exc:
            _resolver(stack=value).resolve_stack_size()
        assert f"'{value}'" in str(exc.value)
        assert "java.stack.size" in str(exc.value)

    def test_percent_in_value_not_reinterpreted(self) -> None:
        assert _resolver(heap="50%").resolve_heap_size() == "-Xmx50%"


class TestNamedOptions:
    @pytest.mark.parametrize("option, method, expected", [
        ("heap", "resolve_heap_size", "-Xmx1g"),
        ("permgen", "resolve_permgen_size", "-XX:MaxPermSize=1g"),
        ("stack", "resolve_stack_size", "-Xss1g"),
    ])
    def test_flag_format(self, option: str, method: str, expected: str) -> None:
        resolver = _resolver(**{option: "1g"})
        assert getattr(resolver, method)() == expected

    @pytest.mark.parametrize("option, label", [
        ("heap", "堆大小"),
        ("permgen", "PermGen 大小"),
        ("stack", "栈大小"),
    ])
    def test_error_names_option(self, option: str, label: str) -> None:
        with pytest.raises(ConfigError, match=label):
            _resolver(**{option: "1 g"}).resolve_all()


class TestResolveAll:
    def test_fixed_order(self) -> None:
        resolver = _resolver(stack="256k", heap="512m", permgen="128m")
        assert resolver.resolve_all() == [
            "-Xmx512m", "-XX:MaxPermSize=128m", "-Xss256k",
        ]

    def test_absent_values_skipped(self) -> None:
        assert _resolver(stack="256k").resolve_all() == ["-Xss256k"]

    def test_nothing_configured(self) -> None:
        assert _resolver().resolve_all() == []

    def test_deterministic(self) -> None:
        resolver = _resolver(heap="512m", stack="1m")
        assert resolver.resolve_all() == resolver.resolve_all()
