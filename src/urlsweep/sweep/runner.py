# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Drive a sweep: probe each URL in order and record it before moving on."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor

from ..models import BatchSummary, ProbeOutcome, ProbeRequest
from .executor import ProbeExecutor
from .recorder import ResultRecorder


class BatchRunner:
    """
    Coordinates the executor and recorder for a whole URL list.

    With ``workers > 1`` probes overlap in a thread pool, but outcomes are still
    recorded one at a time, on the calling thread, in input order.
    """

    def __init__(self, executor: ProbeExecutor, recorder: ResultRecorder, *, workers: int = 1):
        self.executor = executor
        self.recorder = recorder
        self.workers = max(1, workers)

    def outcomes(self, urls: Iterable[str], template: ProbeRequest) -> Iterator[ProbeOutcome]:
        if self.workers == 1:
            for url in urls:
                yield self.executor.probe(template.for_url(url))
            return

        window = self.workers * 2
        pending: deque[Future[ProbeOutcome]] = deque()
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="urlsweep-probe") as pool:
            for url in urls:
                pending.append(pool.submit(self.executor.probe, template.for_url(url)))
                if len(pending) >= window:
                    yield pending.popleft().result()
            while pending:
                yield pending.popleft().result()

    def run(self, urls: Iterable[str], template: ProbeRequest) -> BatchSummary:
        summary = BatchSummary()
        for outcome in self.outcomes(urls, template):
            self.recorder.record(outcome)
            summary = summary.record(outcome)
        return summary


__all__ = ["BatchRunner"]
