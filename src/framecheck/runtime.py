# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level framecheck facade for probe and proxy workflows."""

from __future__ import annotations

from contextlib import suppress

from .config import HttpSettings, load_http_settings
from .errors import InvalidInputError
from .http.client import HttpClient, create_default_http_client
from .http.url import MISSING_URL_MESSAGE, format_url
from .models import DEFAULT_SETTINGS, CheckerSettings, CheckReport, CheckRequest, ProbeResult, ProxyResponse
from .probe import DirectProbe
from .proxy.fetcher import ProxyFetcher
from .viewer import build_proxy_url, frame_size


class FrameCheck:
    """
    Convenience wrapper that shares one HTTP client between the direct probe and
    the proxy fetcher.

    Settings are passed per call; the facade holds no user state.
    """

    def __init__(self, http_client: HttpClient | None = None, http_settings: HttpSettings | None = None):
        self.http_settings = http_settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.probe_engine = DirectProbe(self.http_client, self.http_settings)
        self.fetcher = ProxyFetcher(self.http_client, self.http_settings)

    def probe(self, url: str, settings: CheckerSettings = DEFAULT_SETTINGS) -> ProbeResult:
        return self.probe_engine.run(url, user_agent=settings.user_agent.strip() or None)

    def fetch(self, request: CheckRequest) -> ProxyResponse:
        return self.fetcher.fetch(request)

    def fetch_url(self, url: str, settings: CheckerSettings = DEFAULT_SETTINGS) -> ProxyResponse:
        """Format user input the way the checker does, then proxy it."""
        return self.fetch(settings.to_check_request(format_url(url)))

    def check(
        self,
        url: str,
        settings: CheckerSettings = DEFAULT_SETTINGS,
        *,
        proxy_base: str = "/proxy",
    ) -> CheckReport:
        target = format_url(url)
        if not target:
            raise InvalidInputError(MISSING_URL_MESSAGE)
        width, height = frame_size(settings)
        return CheckReport(
            url=target,
            probe=self.probe(target, settings),
            frame_src=build_proxy_url(target, settings, base=proxy_base),
            frame_width=width,
            frame_height=height,
            settings=settings,
        )

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> FrameCheck:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
