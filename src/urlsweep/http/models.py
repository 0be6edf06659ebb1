# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across UrlSweep."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None
    allow_redirects: bool | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    ``ok`` reports transport success only: a 404 or 503 that arrived intact is
    ``ok=True`` with its status code. ``ok=False`` always carries an
    ``error_message``; ``status_code`` is set alongside it only when the failure
    still exposed a partial response.
    """

    ok: bool
    status_code: int | None = None
    reason_phrase: str | None = None
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: Exception, *, url: str | None = None) -> HttpResponse:
        """Normalize a transport exception, keeping any status the exception exposes."""
        from ..errors import categorize_exception, error_category_to_reason

        category = categorize_exception(exc)
        partial = getattr(exc, "response", None)
        status_code = getattr(partial, "status_code", None)
        reason_phrase = getattr(partial, "reason_phrase", None)
        return cls(
            ok=False,
            status_code=status_code if isinstance(status_code, int) else None,
            reason_phrase=reason_phrase or None,
            url=url,
            error_message=str(exc) or error_category_to_reason(category),
            error_type=type(exc).__name__,
            error_category=category.value,
        )
