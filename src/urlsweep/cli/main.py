# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""UrlSweep CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..config import (
    DEFAULT_LOG_FILE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_RESULTS_DIR,
    SUPPORTED_METHODS,
    SweepSettings,
    load_sweep_settings,
)
from ..errors import InputNotFound, SweepError
from ..log import close_log_sink, open_log_sink, setup_logging
from ..models import BatchSummary
from ..runtime import UrlSweep

logger = logging.getLogger(__name__)

URL_LIST_TEMPLATE = """\
# UrlSweep URL list
#
# One URL per line. Only lines starting with http:// or https:// are probed.
# Lines starting with # are comments; blank lines are ignored.
#
# Examples:
# https://www.example.com/
# https://api.example.com/health
# http://intranet.local:8080/status
"""


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive integer")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UrlSweep: probe a list of URLs and record status and latency")
    parser.add_argument("-i", "--input", type=Path, help="URL list, one URL per line (default: urls.txt)")
    parser.add_argument("-o", "--output", type=Path, help=f"CSV results file (default: <results-dir>/{DEFAULT_OUTPUT_FILE})")
    parser.add_argument("-l", "--log", type=Path, help=f"Log file (default: <results-dir>/{DEFAULT_LOG_FILE})")
    parser.add_argument("--results-dir", type=Path, help=f"Directory for default output files (default: {DEFAULT_RESULTS_DIR})")
    parser.add_argument(
        "-m",
        "--method",
        type=str.upper,
        choices=SUPPORTED_METHODS,
        help="HTTP method used for every probe (default: GET)",
    )
    parser.add_argument("-t", "--timeout", type=_positive_int, help="Per-request timeout in seconds (default: 30)")
    parser.add_argument("-w", "--workers", type=_positive_int, help="Number of probes in flight at once (default: 1)")
    parser.add_argument(
        "-k",
        "--ignore-cert-errors",
        action="store_true",
        help="Skip TLS certificate validation (self-signed or lab endpoints)",
    )
    parser.add_argument("--follow-redirects", action="store_true", help="Follow 3xx responses instead of reporting them")
    parser.add_argument("--no-color", action="store_true", help="Disable colored console output")
    parser.add_argument("--log-level", help="Diagnostic log level for stderr (default: WARNING)")
    return parser


def resolve_settings(args: argparse.Namespace, base: SweepSettings | None = None) -> SweepSettings:
    """Layer CLI arguments over environment-backed settings."""
    settings = base or load_sweep_settings()
    if args.results_dir is not None:
        settings.output_path = args.results_dir / DEFAULT_OUTPUT_FILE
        settings.log_path = args.results_dir / DEFAULT_LOG_FILE
    if args.input is not None:
        settings.input_path = args.input
    if args.output is not None:
        settings.output_path = args.output
    if args.log is not None:
        settings.log_path = args.log
    if args.method is not None:
        settings.method = args.method
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.workers is not None:
        settings.workers = args.workers
    if args.ignore_cert_errors:
        settings.ignore_cert_errors = True
    if args.follow_redirects:
        settings.http.allow_redirects = True
    return settings


def prepare_output_dirs(settings: SweepSettings) -> None:
    for path in (settings.output_path, settings.log_path):
        path.parent.mkdir(parents=True, exist_ok=True)


def write_url_template(path: Path) -> bool:
    """Create a commented URL list at ``path``; False if it could not be written."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(URL_LIST_TEMPLATE, encoding="utf-8")
    except OSError as exc:
        logger.error("Could not create URL list template at %s: %s", path, exc)
        return False
    return True


def _log_fatal(settings: SweepSettings, message: str) -> None:
    try:
        sink = open_log_sink(settings.log_path)
    except OSError:
        return
    sink.error(message)
    close_log_sink(sink)


def _print_summary(summary: BatchSummary, settings: SweepSettings) -> None:
    print()
    print("URL sweep complete")
    print(f"  Total processed: {summary.total}")
    print(f"  Successful:      {summary.succeeded}")
    print(f"  Failed:          {summary.failed}")
    print(f"  Results:         {settings.output_path}")
    print(f"  Log:             {settings.log_path}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings = resolve_settings(args)
    try:
        settings.validate()
        prepare_output_dirs(settings)
    except (SweepError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not settings.input_path.is_file():
        message = str(InputNotFound(settings.input_path))
        print(f"Error: {message}", file=sys.stderr)
        if write_url_template(settings.input_path):
            print(f"A template URL list was created at {settings.input_path}; add URLs to it and run again.", file=sys.stderr)
        _log_fatal(settings, message)
        return 1

    try:
        with UrlSweep(settings, color=not args.no_color) as sweep:
            summary = sweep.run()
    except (SweepError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted; results recorded so far are kept.", file=sys.stderr)
        return 130

    _print_summary(summary, settings)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
