# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Direct status probe against the real origin."""

from __future__ import annotations

import logging

import httpx

from .config import HttpSettings, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .http.headers import normalize_headers
from .http.models import HttpRequest
from .models.probe import ProbeResult

logger = logging.getLogger(__name__)


class DirectProbe:
    """HEAD-style check that reports status, timing and headers without raising on 4xx/5xx."""

    def __init__(self, http_client: HttpClient | None = None, settings: HttpSettings | None = None):
        self.settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.settings)

    def run(self, url: str, *, user_agent: str | None = None) -> ProbeResult:
        headers = {"User-Agent": user_agent} if user_agent else None
        response = self.http_client.request(
            HttpRequest(
                url=url,
                method="HEAD",
                headers=headers,
                timeout=self.settings.probe_timeout,
                allow_redirects=True,
            )
        )
        elapsed_ms = round(response.elapsed_ms) if response.elapsed_ms is not None else None

        if not response.ok:
            logger.info("Probe of %s failed: %s", url, response.error_message)
            return ProbeResult(
                url=url,
                elapsed_ms=elapsed_ms,
                error=response.error_message or "Failed to reach website",
                error_category=response.error_category,
            )

        status = response.status_code
        status_text = response.reason
        if not status_text and status is not None:
            status_text = httpx.codes.get_reason_phrase(status)
        return ProbeResult(
            url=url,
            status_code=status,
            status_text=status_text,
            elapsed_ms=elapsed_ms,
            headers=normalize_headers(response.headers),
            final_url=response.url,
        )

    def close(self) -> None:
        if hasattr(self.http_client, "close"):
            self.http_client.close()


__all__ = ["DirectProbe"]
