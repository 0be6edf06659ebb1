# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import threading

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import ErrorCategory
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    Certificate validation is fixed when the client is built from
    ``HttpSettings.verify_ssl``; nothing process-wide is touched, so two clients
    with different modes can coexist.

    httpx applies ``timeout`` to each connect/read phase separately, so a
    server trickling its headers can stall a request indefinitely. ``request``
    therefore runs the exchange on a daemon thread and gives up once the whole
    exchange has taken ``timeout`` seconds.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            trust_env=self.settings.trust_env,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        result: list[HttpResponse] = []
        done = threading.Event()

        def exchange() -> None:
            try:
                result.append(self._exchange(request, timeout))
            finally:
                done.set()

        worker = threading.Thread(target=exchange, name="urlsweep-http", daemon=True)
        worker.start()
        if done.wait(timeout) and result:
            return result[0]

        # The abandoned exchange ends on its own once the server stops
        # sending or the per-phase timeout fires; its result is discarded.
        return HttpResponse(
            ok=False,
            url=request.url,
            error_message=f"No complete response headers within {timeout:g}s",
            error_type="DeadlineExceeded",
            error_category=ErrorCategory.TIMEOUT.value,
        )

    def _exchange(self, request: HttpRequest, timeout: float) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        follow_redirects = request.allow_redirects if request.allow_redirects is not None else self.settings.allow_redirects

        try:
            # Leaving the stream context without iterating closes the response
            # once the status line and headers have arrived.
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=timeout,
                follow_redirects=follow_redirects,
            ) as resp:
                return HttpResponse(
                    ok=True,
                    status_code=resp.status_code,
                    reason_phrase=resp.reason_phrase,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                    meta={"http_version": resp.http_version},
                )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.from_exception(exc, url=request.url)

    def close(self) -> None:
        self._client.close()
