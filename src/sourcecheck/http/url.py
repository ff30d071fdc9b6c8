# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for probe targets."""

from __future__ import annotations

from urllib.parse import quote

DEFAULT_TEST_QUERY = "test"


def build_test_url(base: str, query: str = DEFAULT_TEST_QUERY) -> str:
    """
    Append the standard AppleCMS v10 search query to an API base URL.

    Example:
      https://api.example.com/provide/vod -> https://api.example.com/provide/vod?ac=videolist&wd=test&pg=1

    An empty base yields a relative URL that fails at the HTTP layer.
    """
    url = str(base if base is not None else "").strip()
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}ac=videolist&wd={quote(query, safe='')}&pg=1"


__all__ = ["DEFAULT_TEST_QUERY", "build_test_url"]
