# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Server-side page fetcher that re-serves bodies for frame embedding."""

from __future__ import annotations

import logging
import random

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import NetworkError, UpstreamError
from ..http.client import HttpClient, create_default_http_client
from ..http.models import HttpRequest
from ..http.url import parse_target_url
from ..models.check import PROXY_CONTENT_TYPE, CheckRequest, ProxyResponse
from .headers import synthesize_headers

logger = logging.getLogger(__name__)

# Response headers that let the caller embed the proxied body in a child frame.
FRAME_PERMISSIVE_HEADERS = {
    "X-Frame-Options": "ALLOWALL",
    "Content-Security-Policy": "frame-ancestors *",
}


class ProxyFetcher:
    """Performs one GET per CheckRequest; no caching and no retries."""

    def __init__(
        self,
        http_client: HttpClient | None = None,
        settings: HttpSettings | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.settings)
        self._rng = rng

    def fetch(self, request: CheckRequest) -> ProxyResponse:
        """
        Fetch ``request.target_url`` and return its body as HTML.

        Raises InvalidInputError before any network activity when the target is
        not an absolute URL, UpstreamError when the final response is not 2xx,
        and NetworkError for transport failures, timeouts and oversized bodies.
        """
        target_url = parse_target_url(request.target_url)
        headers = synthesize_headers(request, default_user_agent=self.settings.user_agent, rng=self._rng)

        response = self.http_client.request(
            HttpRequest(
                url=target_url,
                method="GET",
                headers=headers,
                timeout=self.settings.timeout,
                allow_redirects=True,
            )
        )

        if not response.ok:
            logger.warning("Proxy fetch of %s failed: %s", target_url, response.error_message)
            raise NetworkError(response.error_message or "Unknown error", response.error_category)

        status = response.status_code or 0
        if not response.is_success:
            status_text = response.reason or httpx.codes.get_reason_phrase(status)
            logger.info("Upstream %s answered %s %s", target_url, status, status_text)
            raise UpstreamError(status, status_text)

        declared = response.content_type or "text/html"
        logger.debug("Proxied %s (%d chars, declared %s)", target_url, len(response.text), declared)
        return ProxyResponse(
            body=response.text,
            declared_content_type=declared,
            upstream_status=status,
            content_type=PROXY_CONTENT_TYPE,
            final_url=response.url,
            request_headers=headers,
        )

    def close(self) -> None:
        if hasattr(self.http_client, "close"):
            self.http_client.close()


__all__ = ["FRAME_PERMISSIVE_HEADERS", "ProxyFetcher"]
