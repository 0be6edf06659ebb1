# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read the URL list that drives a sweep."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterator
from pathlib import Path

from ..errors import InputNotFound, NoValidURLs

URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def is_probe_line(line: str) -> bool:
    """True for lines that name a URL to probe; comments, blanks and other schemes are skipped."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return False
    return URL_PATTERN.match(stripped) is not None


def _iter_urls(path: Path) -> Iterator[str]:
    # Undecodable bytes become U+FFFD; a URL containing one fails at probe time, not here.
    with path.open("r", encoding="utf-8-sig", errors="replace") as handle:
        for line in handle:
            if is_probe_line(line):
                yield line.strip()


def load_urls(path: Path | str) -> Iterator[str]:
    """
    Lazily yield the URLs listed in ``path`` in file order.

    Raises InputNotFound when the file is missing and NoValidURLs when it
    holds nothing probeable. The first URL is read eagerly so the empty case
    is reported before any probing starts; the rest streams from the file.
    """
    path = Path(path)
    if not path.is_file():
        raise InputNotFound(path)

    urls = _iter_urls(path)
    try:
        first = next(urls)
    except StopIteration:
        raise NoValidURLs(path) from None
    return itertools.chain([first], urls)


__all__ = ["URL_PATTERN", "is_probe_line", "load_urls"]
