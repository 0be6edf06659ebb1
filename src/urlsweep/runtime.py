# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level UrlSweep facade wiring loader, executor, recorder and runner."""

from __future__ import annotations

import logging
from contextlib import suppress
from typing import TextIO

from .config import SweepSettings
from .errors import SweepError
from .http.client import HttpClient, create_default_http_client
from .models import BatchSummary, ProbeRequest
from .sweep.executor import ProbeExecutor
from .sweep.loader import load_urls
from .sweep.recorder import ResultRecorder
from .sweep.runner import BatchRunner


class UrlSweep:
    """
    Runs one sweep for a SweepSettings.

    The HTTP client is built from the batch's transport settings, so the
    certificate mode lives only as long as the client does and is released
    by ``close()`` whether the sweep finished or failed.
    """

    def __init__(
        self,
        settings: SweepSettings,
        *,
        http_client: HttpClient | None = None,
        color: bool = False,
        stream: TextIO | None = None,
    ):
        self.settings = settings.validate()
        self.http_client = http_client or create_default_http_client(settings.http_settings())
        self.executor = ProbeExecutor(self.http_client)
        self.recorder = ResultRecorder(
            settings.output_path,
            settings.log_path,
            ignore_cert_errors=settings.ignore_cert_errors,
            color=color,
            stream=stream,
        )
        self.runner = BatchRunner(self.executor, self.recorder, workers=settings.workers)

    def probe_template(self) -> ProbeRequest:
        return ProbeRequest(
            url="",
            method=self.settings.method,
            timeout=self.settings.timeout,
            verify_ssl=not self.settings.ignore_cert_errors,
        )

    def run(self) -> BatchSummary:
        settings = self.settings
        try:
            urls = load_urls(settings.input_path)
        except (SweepError, OSError) as exc:
            self.recorder.log(logging.ERROR, f"Cannot start sweep: {exc}")
            raise

        self.recorder.log(
            logging.INFO,
            f"Starting URL sweep: input={settings.input_path} method={settings.method} "
            f"timeout={settings.timeout}s ignore_cert_errors={settings.ignore_cert_errors}",
        )
        summary = self.runner.run(urls, self.probe_template())
        self.recorder.log(
            logging.INFO,
            f"URL sweep complete: total={summary.total} success={summary.succeeded} failure={summary.failed}",
        )
        return summary

    def close(self) -> None:
        with suppress(Exception):
            self.recorder.close()
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> "UrlSweep":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
