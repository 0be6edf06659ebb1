# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sweep pipeline: load, probe, record, summarize."""

from .executor import ProbeExecutor
from .loader import load_urls
from .recorder import ResultRecorder
from .runner import BatchRunner

__all__ = ["BatchRunner", "ProbeExecutor", "ResultRecorder", "load_urls"]
