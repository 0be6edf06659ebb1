# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Persist probe outcomes: CSV row, log line, console line."""

from __future__ import annotations

import csv
import logging
import sys
from pathlib import Path
from typing import TextIO

from ..log import close_log_sink, open_log_sink
from ..models import ProbeOutcome, StatusClass

logger = logging.getLogger(__name__)

CSV_COLUMNS = (
    "Timestamp",
    "URL",
    "Method",
    "StatusCode",
    "StatusDescription",
    "ResponseTimeMs",
    "ErrorMessage",
    "IgnoreCertErrors",
)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MISSING = "N/A"

_COLORS = {
    StatusClass.SUCCESS: "\033[32m",
    StatusClass.REDIRECT: "\033[33m",
    StatusClass.ERROR: "\033[31m",
    StatusClass.FAILURE: "\033[31m",
}
_RESET = "\033[0m"
_LOG_LEVELS = {
    StatusClass.SUCCESS: logging.INFO,
    StatusClass.REDIRECT: logging.INFO,
    StatusClass.ERROR: logging.WARNING,
    StatusClass.FAILURE: logging.ERROR,
}


def format_elapsed(elapsed_ms: float | None) -> str:
    return MISSING if elapsed_ms is None else f"{elapsed_ms:.2f}"


def outcome_to_row(outcome: ProbeOutcome, *, ignore_cert_errors: bool) -> list[str]:
    """Encode an outcome in CSV column order."""
    has_status = outcome.status_code is not None
    return [
        outcome.timestamp.strftime(TIMESTAMP_FORMAT),
        outcome.url,
        outcome.method,
        str(outcome.status_code) if has_status else MISSING,
        (outcome.status_description or "") if has_status else "Error",
        format_elapsed(outcome.elapsed_ms),
        outcome.error_message or "",
        str(bool(ignore_cert_errors)),
    ]


def format_log_message(outcome: ProbeOutcome) -> str:
    elapsed = format_elapsed(outcome.elapsed_ms)
    if outcome.status_code is None:
        return f"{outcome.method} {outcome.url} - FAILED after {elapsed} ms: {outcome.error_message}"
    description = f" {outcome.status_description}" if outcome.status_description else ""
    message = f"{outcome.method} {outcome.url} - {outcome.status_code}{description} in {elapsed} ms"
    if outcome.error_message:
        message += f" ({outcome.error_message})"
    return message


def format_console_line(outcome: ProbeOutcome, *, color: bool = False) -> str:
    status_class = outcome.status_class
    status = MISSING if outcome.status_code is None else str(outcome.status_code)
    line = f"[{status_class.value}] {status} {outcome.method} {outcome.url} ({format_elapsed(outcome.elapsed_ms)} ms)"
    if outcome.error_message:
        line += f" - {outcome.error_message}"
    if color:
        return f"{_COLORS[status_class]}{line}{_RESET}"
    return line


class ResultRecorder:
    """
    Appends each outcome to the CSV sink and log sink and echoes it to the console.

    Sink write failures are reported through the module logger and swallowed
    for that row only; the sweep keeps going.
    """

    def __init__(
        self,
        output_path: Path | str,
        log_path: Path | str,
        *,
        ignore_cert_errors: bool = False,
        color: bool = False,
        stream: TextIO | None = None,
    ):
        self.output_path = Path(output_path)
        self.log_path = Path(log_path)
        self.ignore_cert_errors = ignore_cert_errors
        self._stream = stream
        self.color = color and self.stream.isatty()
        self._sink = open_log_sink(self.log_path)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def record(self, outcome: ProbeOutcome) -> None:
        self._append_row(outcome)
        self.log(_LOG_LEVELS[outcome.status_class], format_log_message(outcome))
        self._echo(outcome)

    def _echo(self, outcome: ProbeOutcome) -> None:
        try:
            print(format_console_line(outcome, color=self.color), file=self.stream, flush=True)
        except (OSError, UnicodeError) as exc:
            logger.error("Could not print result for %s to console: %s", outcome.url, exc)

    def log(self, level: int, message: str) -> None:
        try:
            self._sink.log(level, message)
        except Exception as exc:  # noqa: BLE001
            logger.error("Could not write to log %s: %s", self.log_path, exc)

    def _append_row(self, outcome: ProbeOutcome) -> None:
        row = outcome_to_row(outcome, ignore_cert_errors=self.ignore_cert_errors)
        try:
            write_header = not self.output_path.exists() or self.output_path.stat().st_size == 0
            with self.output_path.open("a", newline="", encoding="utf-8") as handle:
                writer = csv.writer(handle)
                if write_header:
                    writer.writerow(CSV_COLUMNS)
                writer.writerow(row)
        except OSError as exc:
            logger.error("Could not append result for %s to %s: %s", outcome.url, self.output_path, exc)

    def close(self) -> None:
        close_log_sink(self._sink)


__all__ = [
    "CSV_COLUMNS",
    "ResultRecorder",
    "format_console_line",
    "format_log_message",
    "outcome_to_row",
]
