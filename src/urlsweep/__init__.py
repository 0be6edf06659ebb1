# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
UrlSweep package entrypoint.

UrlSweep probes a list of HTTP(S) endpoints one request at a time, records
status and latency for each to a CSV file and a log file, and never lets a
single unreachable endpoint stop the sweep. HTTP behavior is abstracted behind
an injectable client interface, and outcomes are modeled with typed dataclasses.
"""

from .config import HttpSettings, SweepSettings, load_http_settings, load_sweep_settings
from .errors import ConfigurationError, ErrorCategory, InputNotFound, NoValidURLs, SweepError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import BatchSummary, ProbeOutcome, ProbeRequest, StatusClass, classify_status
from .runtime import UrlSweep
from .sweep import BatchRunner, ProbeExecutor, ResultRecorder, load_urls
from .version import __version__

__all__ = [
    "BatchRunner",
    "BatchSummary",
    "ConfigurationError",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "InputNotFound",
    "NoValidURLs",
    "ProbeExecutor",
    "ProbeOutcome",
    "ProbeRequest",
    "ResultRecorder",
    "StatusClass",
    "StubHttpClient",
    "SweepError",
    "SweepSettings",
    "UrlSweep",
    "__version__",
    "classify_status",
    "create_default_http_client",
    "load_http_settings",
    "load_sweep_settings",
    "load_urls",
    "setup_logging",
]
