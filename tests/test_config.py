import ssl

import certifi
import pytest
import truststore

from utilkit._config import Config
from utilkit._utils._ssl_context import (
    create_ssl_context,
    custom_ca_locations,
    get_httpx_client_kwargs,
)


class TestConfig:
    def test_defaults(self):
        config = Config()

        assert config.default_retries == 0
        assert config.default_timeout is None
        assert config.follow_redirects is True
        assert config.debug is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("UTILKIT_DEFAULT_RETRIES", "2")
        monkeypatch.setenv("UTILKIT_DEFAULT_TIMEOUT", "1500")
        monkeypatch.setenv("UTILKIT_FOLLOW_REDIRECTS", "false")
        monkeypatch.setenv("UTILKIT_DEBUG", "1")

        config = Config.from_env()

        assert config.default_retries == 2
        assert config.default_timeout == 1500.0
        assert config.follow_redirects is False
        assert config.debug is True

    def test_rejects_negative_retries(self):
        with pytest.raises(ValueError):
            Config(default_retries=-1)


class TestHttpxClientKwargs:
    def test_defaults(self):
        kwargs = get_httpx_client_kwargs()

        assert kwargs["follow_redirects"] is True
        assert kwargs["timeout"] is None
        assert kwargs["verify"] is not False

    def test_disable_ssl_verify(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("UTILKIT_DISABLE_SSL_VERIFY", "true")

        assert get_httpx_client_kwargs(follow_redirects=False) == {
            "verify": False,
            "follow_redirects": False,
            "timeout": None,
            "trust_env": True,
        }


class TestSslContext:
    def test_uses_os_trust_store_by_default(self):
        assert custom_ca_locations() is None
        assert isinstance(create_ssl_context(), truststore.SSLContext)

    def test_cert_file_is_expanded(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CA_HOME", "/etc/company")
        monkeypatch.setenv("SSL_CERT_FILE", "$CA_HOME/ca.pem")
        monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/ignored.pem")

        assert custom_ca_locations() == ("/etc/company/ca.pem", None)

    def test_requests_bundle_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/etc/bundle.pem")

        assert custom_ca_locations() == ("/etc/bundle.pem", None)

    def test_cert_dir_alone_keeps_certifi_bundle(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SSL_CERT_DIR", "/etc/ssl/certs")

        assert custom_ca_locations() == (certifi.where(), "/etc/ssl/certs")

    def test_configured_bundle_builds_plain_context(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("SSL_CERT_FILE", certifi.where())

        context = create_ssl_context()

        assert not isinstance(context, truststore.SSLContext)
        assert context.verify_mode == ssl.CERT_REQUIRED
