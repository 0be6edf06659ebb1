# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport seam between the probe executor and the network."""

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Sends one probe request and reports what came back.

    Implementations return transport failures as ``HttpResponse(ok=False)``
    instead of raising, and must not take longer than the request timeout.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - stubs may have nothing to release
        ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """Build the httpx-backed client for one sweep; certificate mode comes from ``settings``."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings())
