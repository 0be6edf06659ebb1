# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from urlsweep.errors import InputNotFound, NoValidURLs
from urlsweep.sweep.loader import is_probe_line, load_urls


def _write(tmp_path, lines):
    path = tmp_path / "urls.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_load_urls_filters_and_preserves_order(tmp_path):
    path = _write(
        tmp_path,
        [
            "# comment",
            "",
            "https://example.com/ok",
            "ftp://bad",
            "   # indented comment https://example.com/hidden",
            "  http://example.com/padded  ",
            "example.com/no-scheme",
            "https://example.com/timeout",
        ],
    )

    assert list(load_urls(path)) == [
        "https://example.com/ok",
        "http://example.com/padded",
        "https://example.com/timeout",
    ]


def test_load_urls_is_single_pass(tmp_path):
    urls = load_urls(_write(tmp_path, ["https://a.example", "https://b.example"]))
    assert list(urls) == ["https://a.example", "https://b.example"]
    assert list(urls) == []


def test_load_urls_missing_file(tmp_path):
    with pytest.raises(InputNotFound) as excinfo:
        load_urls(tmp_path / "nope.txt")
    assert excinfo.value.path == tmp_path / "nope.txt"


@pytest.mark.parametrize("lines", [[], [""], ["# only", "  # comments"], ["ftp://x", "mailto:a@b"]])
def test_load_urls_without_valid_entries(tmp_path, lines):
    with pytest.raises(NoValidURLs):
        load_urls(_write(tmp_path, lines))


def test_load_urls_ignores_utf8_bom(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_bytes("\ufeffhttps://bom.example\n".encode("utf-8"))
    assert list(load_urls(path)) == ["https://bom.example"]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("https://x", True),
        ("http://x", True),
        ("HTTPS://X", True),
        ("\thttps://x\n", True),
        ("#https://x", False),
        ("httpx://x", False),
        ("https:/x", False),
        ("", False),
    ],
)
def test_is_probe_line(line, expected):
    assert is_probe_line(line) is expected


def test_load_urls_tolerates_undecodable_bytes(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_bytes(b"https://a.example/\n# caf\xe9 comment\nhttps://b.example/\n")

    assert list(load_urls(path)) == ["https://a.example/", "https://b.example/"]
