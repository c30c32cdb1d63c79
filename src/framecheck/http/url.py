# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers: strict target validation, scheme prefixing and query editing."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from ..errors import InvalidInputError

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOST_FORBIDDEN = re.compile(r"[\s<>\\^|]")

MISSING_URL_MESSAGE = "URL parameter is required"
INVALID_URL_MESSAGE = "Invalid URL format"


def _split_absolute(raw: str) -> SplitResult | None:
    try:
        parts = urlsplit(raw)
        port_ok = parts.port is None or 0 <= parts.port < 65536
    except ValueError:
        return None
    if not _SCHEME_RE.match(parts.scheme or ""):
        return None
    host = parts.hostname or ""
    if not host or _HOST_FORBIDDEN.search(host):
        return None
    if not port_ok:
        return None
    return parts


def is_absolute_url(value: str | None) -> bool:
    """Return True when ``value`` carries both a scheme and a host."""
    if not value:
        return False
    return _split_absolute(str(value).strip()) is not None


def parse_target_url(value: str | None) -> str:
    """
    Validate a proxy target and return it stripped of surrounding whitespace.

    No scheme is ever inferred: ``example.com`` is rejected. Raises
    InvalidInputError for missing or malformed input.
    """
    if value is None or value == "":
        raise InvalidInputError(MISSING_URL_MESSAGE)
    raw = str(value).strip()
    if _split_absolute(raw) is None:
        raise InvalidInputError(INVALID_URL_MESSAGE)
    return raw


def format_url(value: str | None) -> str:
    """Prefix ``https://`` onto user input that lacks an http(s) scheme."""
    raw = str(value or "").strip()
    if not raw:
        return ""
    if not raw.startswith(("http://", "https://")):
        return "https://" + raw
    return raw


def query_params(url: str) -> list[tuple[str, str]]:
    """Return the query string of ``url`` as ordered (key, value) pairs."""
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def replace_query_params(url: str, params: list[tuple[str, str]] | dict[str, str]) -> str:
    """Return ``url`` with its whole query string replaced by ``params``."""
    parts = urlsplit(url)
    pairs = list(params.items()) if isinstance(params, dict) else list(params)
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def set_query_param(url: str, key: str, value: str) -> str:
    """
    Set ``key`` to ``value``, keeping the position of its first occurrence.

    Later duplicates of ``key`` are dropped; a new key is appended.
    """
    pairs: list[tuple[str, str]] = []
    replaced = False
    for name, current in query_params(url):
        if name != key:
            pairs.append((name, current))
        elif not replaced:
            pairs.append((key, value))
            replaced = True
    if not replaced:
        pairs.append((key, value))
    return replace_query_params(url, pairs)


def remove_query_param(url: str, key: str) -> str:
    """Drop every occurrence of ``key`` from the query string."""
    return replace_query_params(url, [(name, value) for name, value in query_params(url) if name != key])


__all__ = [
    "INVALID_URL_MESSAGE",
    "MISSING_URL_MESSAGE",
    "format_url",
    "is_absolute_url",
    "parse_target_url",
    "query_params",
    "remove_query_param",
    "replace_query_params",
    "set_query_param",
]
