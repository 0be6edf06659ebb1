# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl
from pathlib import Path

import httpx
import pytest

from urlsweep import config
from urlsweep.config import DEFAULT_USER_AGENT, HttpSettings, SweepSettings
from urlsweep.errors import (
    ConfigurationError,
    ErrorCategory,
    InputNotFound,
    NoValidURLs,
    SweepError,
    categorize_exception,
    error_category_to_reason,
)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("URLSWEEP_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("URLSWEEP_HTTP_REDIRECTS", "true")
    monkeypatch.setenv("URLSWEEP_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("URLSWEEP_HTTP_TRUST_ENV", "no")

    settings = config.load_http_settings()

    assert settings.timeout == HttpSettings.timeout == 30.0
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is True
    assert settings.verify_ssl is False
    assert settings.trust_env is False


def test_http_settings_defaults(monkeypatch):
    monkeypatch.delenv("URLSWEEP_USER_AGENT", raising=False)
    monkeypatch.delenv("URLSWEEP_HTTP_REDIRECTS", raising=False)

    settings = config.load_http_settings()

    assert settings.allow_redirects is False
    assert DEFAULT_USER_AGENT in settings.user_agent


def test_sweep_timeout_env_drives_transport_timeout(monkeypatch):
    monkeypatch.setenv("URLSWEEP_TIMEOUT", "7")

    assert config.load_sweep_settings().http_settings().timeout == 7.0

    monkeypatch.setenv("URLSWEEP_TIMEOUT", "not-a-number")
    assert config.load_sweep_settings().http_settings().timeout == 30.0


def test_sweep_settings_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("URLSWEEP_INPUT", str(tmp_path / "list.txt"))
    monkeypatch.setenv("URLSWEEP_OUTPUT", str(tmp_path / "out.csv"))
    monkeypatch.setenv("URLSWEEP_LOG", str(tmp_path / "out.log"))
    monkeypatch.setenv("URLSWEEP_METHOD", "head")
    monkeypatch.setenv("URLSWEEP_IGNORE_CERT_ERRORS", "yes")
    monkeypatch.setenv("URLSWEEP_TIMEOUT", "12")
    monkeypatch.setenv("URLSWEEP_WORKERS", "bogus")

    settings = config.load_sweep_settings()

    assert settings.input_path == tmp_path / "list.txt"
    assert settings.output_path == tmp_path / "out.csv"
    assert settings.log_path == tmp_path / "out.log"
    assert settings.method == "HEAD"
    assert settings.ignore_cert_errors is True
    assert settings.timeout == 12
    assert settings.workers == 1


def test_sweep_settings_defaults():
    settings = SweepSettings()
    assert settings.input_path == Path("urls.txt")
    assert settings.output_path == Path("results") / "url_results.csv"
    assert settings.log_path == Path("results") / "url_check.log"
    assert settings.method == "GET"
    assert settings.timeout == 30
    assert settings.ignore_cert_errors is False


@pytest.mark.parametrize(
    "overrides",
    [
        {"method": "DELETE"},
        {"timeout": 0},
        {"timeout": -5},
        {"workers": 0},
    ],
)
def test_sweep_settings_validate_rejects_bad_values(overrides):
    with pytest.raises(ConfigurationError):
        SweepSettings(**overrides).validate()


def test_http_settings_carry_certificate_mode():
    strict = SweepSettings(timeout=7).http_settings()
    assert strict.verify_ssl is True
    assert strict.timeout == 7.0

    bypass = SweepSettings(ignore_cert_errors=True).http_settings()
    assert bypass.verify_ssl is False
    # deriving a bypass configuration leaves the base settings untouched
    assert SweepSettings().http.verify_ssl is True


def test_fatal_errors_share_base_and_carry_path(tmp_path):
    missing = InputNotFound(tmp_path / "urls.txt")
    empty = NoValidURLs(tmp_path / "urls.txt")
    assert isinstance(missing, SweepError)
    assert isinstance(empty, SweepError)
    assert missing.path == tmp_path / "urls.txt"
    assert "not found" in str(missing)
    assert "No valid" in str(empty)


def test_categorize_exception_maps_transport_failures():
    request = httpx.Request("GET", "https://example.com")
    assert categorize_exception(httpx.ReadTimeout("timed out", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectTimeout("timed out", request=request)) is ErrorCategory.TIMEOUT
    assert (
        categorize_exception(httpx.ConnectError("[Errno 111] Connection refused", request=request))
        is ErrorCategory.CONNECTION_ERROR
    )
    assert (
        categorize_exception(httpx.ConnectError("[Errno -2] Name or service not known", request=request))
        is ErrorCategory.DNS_ERROR
    )
    assert (
        categorize_exception(httpx.ConnectError("[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed", request=request))
        is ErrorCategory.SSL_ERROR
    )
    assert categorize_exception(httpx.RemoteProtocolError("bad", request=request)) is ErrorCategory.PROTOCOL_ERROR
    assert categorize_exception(socket.gaierror(-2, "unknown host")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(ssl.SSLError("handshake")) is ErrorCategory.SSL_ERROR
    assert categorize_exception(ConnectionRefusedError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("odd")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_follows_cause_chain():
    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as inner:
            raise RuntimeError("wrapped") from inner
    except RuntimeError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Request timed out"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""
