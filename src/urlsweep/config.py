# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for UrlSweep."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigurationError
from .version import __version__

DEFAULT_USER_AGENT = f"UrlSweep/{__version__} (+health-check sweep)"
DEFAULT_TIMEOUT = 30
DEFAULT_INPUT_FILE = "urls.txt"
DEFAULT_RESULTS_DIR = "results"
DEFAULT_OUTPUT_FILE = "url_results.csv"
DEFAULT_LOG_FILE = "url_check.log"
SUPPORTED_METHODS = ("GET", "HEAD", "POST")



def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _path_env(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value) if value else default


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = float(DEFAULT_TIMEOUT)
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = False
    verify_ssl: bool = True
    trust_env: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            user_agent=os.getenv("URLSWEEP_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("URLSWEEP_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("URLSWEEP_HTTP_VERIFY_SSL", cls.verify_ssl),
            trust_env=_bool_env("URLSWEEP_HTTP_TRUST_ENV", cls.trust_env),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


@dataclass
class SweepSettings:
    """Batch-level configuration: where to read URLs, where to record, how to probe."""

    input_path: Path = field(default_factory=lambda: Path(DEFAULT_INPUT_FILE))
    output_path: Path = field(default_factory=lambda: Path(DEFAULT_RESULTS_DIR) / DEFAULT_OUTPUT_FILE)
    log_path: Path = field(default_factory=lambda: Path(DEFAULT_RESULTS_DIR) / DEFAULT_LOG_FILE)
    method: str = "GET"
    ignore_cert_errors: bool = False
    timeout: int = DEFAULT_TIMEOUT
    workers: int = 1
    http: HttpSettings = field(default_factory=HttpSettings)

    @classmethod
    def from_env(cls) -> "SweepSettings":
        results_dir = Path(DEFAULT_RESULTS_DIR)
        return cls(
            input_path=_path_env("URLSWEEP_INPUT", Path(DEFAULT_INPUT_FILE)),
            output_path=_path_env("URLSWEEP_OUTPUT", results_dir / DEFAULT_OUTPUT_FILE),
            log_path=_path_env("URLSWEEP_LOG", results_dir / DEFAULT_LOG_FILE),
            method=os.getenv("URLSWEEP_METHOD", "GET").strip().upper(),
            ignore_cert_errors=_bool_env("URLSWEEP_IGNORE_CERT_ERRORS", False),
            timeout=_int_env("URLSWEEP_TIMEOUT", DEFAULT_TIMEOUT),
            workers=_int_env("URLSWEEP_WORKERS", 1),
            http=load_http_settings(),
        )

    def validate(self) -> "SweepSettings":
        if self.method not in SUPPORTED_METHODS:
            raise ConfigurationError(f"Unsupported HTTP method {self.method!r}; expected one of {', '.join(SUPPORTED_METHODS)}")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds, got {self.timeout}")
        if self.workers <= 0:
            raise ConfigurationError(f"Worker count must be positive, got {self.workers}")
        return self

    def http_settings(self) -> HttpSettings:
        """Transport configuration for this batch; certificate mode travels with it."""
        return HttpSettings(
            timeout=float(self.timeout),
            user_agent=self.http.user_agent,
            allow_redirects=self.http.allow_redirects,
            verify_ssl=self.http.verify_ssl and not self.ignore_cert_errors,
            trust_env=self.http.trust_env,
        )


def load_sweep_settings() -> SweepSettings:
    return SweepSettings.from_env()
