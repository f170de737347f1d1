"""URL scheme 校验测试"""

import pytest

from buildpack.core.exceptions import ValidationError
from buildpack.utils.net import validate_url_scheme


class TestValidateUrlScheme:
    def test_http_ok(self) -> None:
        validate_url_scheme("http://example.com/jre.tar.gz")

    def test_https_ok(self) -> None:
        validate_url_scheme("https://example.com/jre.tar.gz")

    def test_file_rejected_by_default(self) -> None:
        with pytest.raises(ValidationError, match="不允许的 URL 协议"):
            validate_url_scheme("file:///tmp/jre.tar.gz")

    def test_file_allowed_when_configured(self) -> None:
        validate_url_scheme("file:///tmp/jre.tar.gz", allowed=["file"])

    def test_scheme_case_insensitive(self) -> None:
        validate_url_scheme("HTTPS://example.com/jre.tar.gz")

    def test_empty_scheme_rejected(self) -> None:
        with pytest.raises(ValidationError, match="不允许的 URL 协议"):
            validate_url_scheme("/local/path")

    def test_context_in_error(self) -> None:
        with pytest.raises(ValidationError, match="cache jre-openjdk"):
            validate_url_scheme("ftp://x/y", context="cache jre-openjdk")
