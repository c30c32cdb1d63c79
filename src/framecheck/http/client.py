# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Upstream transport seam shared by the proxy fetcher and the direct probe."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse

if TYPE_CHECKING:
    import httpx


class HttpClient(Protocol):
    """Anything that turns an HttpRequest into an HttpResponse without raising on transport errors."""

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for stubs
        ...


def create_default_http_client(
    settings: HttpSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> HttpClient:
    """
    Build the httpx-backed client.

    ``transport`` swaps the network layer, e.g. ``httpx.MockTransport`` in tests.
    """
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings(), transport=transport)
