# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from framecheck.errors import InvalidInputError
from framecheck.http.url import (
    format_url,
    is_absolute_url,
    parse_target_url,
    query_params,
    remove_query_param,
    replace_query_params,
    set_query_param,
)


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com",
        "http://example.com:8080/path?q=1#frag",
        "  https://example.com/padded  ",
        "https://[::1]/",
        "ftp://files.example.com/readme",
    ],
)
def test_parse_target_url_accepts_absolute_urls(value):
    assert parse_target_url(value) == value.strip()


@pytest.mark.parametrize(
    "value",
    ["not a url", "example.com", "localhost:8080", "//example.com/path", "https://", "http://exa mple.com", "https://host:99999/"],
)
def test_parse_target_url_rejects_malformed_input(value):
    with pytest.raises(InvalidInputError) as excinfo:
        parse_target_url(value)
    assert excinfo.value.message == "Invalid URL format"
    assert is_absolute_url(value) is False


@pytest.mark.parametrize("value", [None, ""])
def test_parse_target_url_requires_a_value(value):
    with pytest.raises(InvalidInputError) as excinfo:
        parse_target_url(value)
    assert excinfo.value.message == "URL parameter is required"


def test_format_url_prefixes_https_only_when_needed():
    assert format_url("example.com") == "https://example.com"
    assert format_url(" example.com/a ") == "https://example.com/a"
    assert format_url("http://example.com") == "http://example.com"
    assert format_url("https://example.com") == "https://example.com"
    assert format_url("") == ""
    assert format_url(None) == ""


def test_query_param_editor():
    url = "https://example.com/search?q=cats&page=2&q=dogs#top"
    assert query_params(url) == [("q", "cats"), ("page", "2"), ("q", "dogs")]

    updated = set_query_param(url, "q", "birds")
    assert updated == "https://example.com/search?q=birds&page=2#top"

    appended = set_query_param("https://example.com/", "lang", "en")
    assert appended == "https://example.com/?lang=en"

    assert remove_query_param(url, "q") == "https://example.com/search?page=2#top"
    assert replace_query_params(url, {"a": "1 2"}) == "https://example.com/search?a=1+2#top"
    assert query_params("https://example.com/?empty=") == [("empty", "")]
