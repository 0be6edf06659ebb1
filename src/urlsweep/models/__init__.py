# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for UrlSweep."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeOutcome, ProbeRequest, StatusClass, classify_status
from .summary import BatchSummary

__all__ = [
    "BatchSummary",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeOutcome",
    "ProbeRequest",
    "StatusClass",
    "classify_status",
]
