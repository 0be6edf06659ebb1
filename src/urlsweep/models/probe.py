# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request/outcome models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum


class StatusClass(str, Enum):
    SUCCESS = "OK"
    REDIRECT = "REDIRECT"
    ERROR = "ERROR"
    FAILURE = "FAIL"


def classify_status(status_code: int | None) -> StatusClass:
    """Bucket a status code for reporting; ``None`` means no response arrived."""
    if status_code is None:
        return StatusClass.FAILURE
    if 200 <= status_code < 300:
        return StatusClass.SUCCESS
    if 300 <= status_code < 400:
        return StatusClass.REDIRECT
    return StatusClass.ERROR


@dataclass(frozen=True)
class ProbeRequest:
    """Per-call probe configuration; built once per batch and re-targeted per URL."""

    url: str
    method: str = "GET"
    timeout: int = 30
    verify_ssl: bool = True

    def for_url(self, url: str) -> ProbeRequest:
        return replace(self, url=url)

    @property
    def ignore_cert_errors(self) -> bool:
        return not self.verify_ssl


@dataclass(frozen=True)
class ProbeOutcome:
    url: str
    method: str
    elapsed_ms: float
    status_code: int | None = None
    status_description: str | None = None
    error_message: str = ""
    error_category: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def status_class(self) -> StatusClass:
        return classify_status(self.status_code)

    @property
    def succeeded(self) -> bool:
        return self.status_class is StatusClass.SUCCESS
