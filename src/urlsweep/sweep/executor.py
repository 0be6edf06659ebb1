# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Issue one probe and normalize whatever happens into a ProbeOutcome."""

from __future__ import annotations

import logging
import time

from ..errors import ErrorCategory, error_category_to_reason
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..models import ProbeOutcome, ProbeRequest

logger = logging.getLogger(__name__)

POST_BODY = "check=true"
POST_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_http_request(probe: ProbeRequest) -> HttpRequest:
    headers: dict[str, str] = {}
    body: str | None = None
    if probe.method == "POST":
        body = POST_BODY
        headers["Content-Type"] = POST_CONTENT_TYPE
    return HttpRequest(
        url=probe.url,
        method=probe.method,
        headers=headers,
        body=body,
        timeout=float(probe.timeout),
    )


def _failure_message(response: HttpResponse, probe: ProbeRequest) -> str:
    message = (response.error_message or "").strip()
    if response.error_category == ErrorCategory.TIMEOUT.value:
        prefix = f"Request timed out after {probe.timeout}s"
        return f"{prefix}: {message}" if message and message != prefix else prefix
    if not message:
        try:
            category: ErrorCategory | None = ErrorCategory(response.error_category)
        except ValueError:
            category = None
        message = error_category_to_reason(category) or "Request failed"
    return message


class ProbeExecutor:
    """
    Runs single probes against an injected HttpClient.

    ``probe`` never raises for per-URL problems. Transport failures come back as
    outcomes with an error message; any HTTP status, 4xx and 5xx included, is a
    normal outcome with no error message.
    """

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    def probe(self, request: ProbeRequest) -> ProbeOutcome:
        http_request = build_http_request(request)
        started = time.perf_counter()
        try:
            response = self.http_client.request(http_request)
        except Exception as exc:  # noqa: BLE001
            logger.debug("HTTP client raised for %s", request.url, exc_info=True)
            response = HttpResponse.from_exception(exc, url=request.url)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000.0

        if response.ok:
            return ProbeOutcome(
                url=request.url,
                method=request.method,
                elapsed_ms=elapsed_ms,
                status_code=response.status_code,
                status_description=response.reason_phrase,
            )

        return ProbeOutcome(
            url=request.url,
            method=request.method,
            elapsed_ms=elapsed_ms,
            status_code=response.status_code,
            status_description=response.reason_phrase if response.status_code is not None else None,
            error_message=_failure_message(response, request),
            error_category=response.error_category or ErrorCategory.UNKNOWN_ERROR.value,
        )


__all__ = ["POST_BODY", "POST_CONTENT_TYPE", "ProbeExecutor", "build_http_request"]
