# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import time

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import BodyTooLargeError, categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper.

    Bodies are streamed into memory up to ``settings.max_body_bytes`` and the
    whole exchange, body included, must finish within the request timeout.
    Transport failures come back as ``HttpResponse(ok=False, ...)`` rather than
    being raised.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        client: httpx.Client | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            transport=transport,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = 16 * 1024 * 1024

        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        started = time.perf_counter()
        deadline = time.monotonic() + timeout

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                content = bytearray()
                for chunk in resp.iter_bytes():
                    if not chunk:
                        continue
                    if time.monotonic() > deadline:
                        raise httpx.ReadTimeout(f"Timed out reading response body after {timeout:g}s")
                    if len(content) + len(chunk) > max_body_bytes:
                        raise BodyTooLargeError(max_body_bytes)
                    content.extend(chunk)

                encoding = resp.encoding or "utf-8"
                try:
                    text = bytes(content).decode(encoding, errors="replace")
                except LookupError:
                    text = bytes(content).decode("utf-8", errors="replace")

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug("%s %s -> %s in %.0fms", request.method, request.url, resp.status_code, elapsed_ms)
            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                reason=resp.reason_phrase,
                headers=dict(resp.headers),
                text=text,
                content=bytes(content),
                url=str(resp.url),
                elapsed_ms=elapsed_ms,
                meta={
                    "body_bytes_read": len(content),
                    "body_bytes_limit": max_body_bytes,
                    "redirects": len(resp.history),
                },
            )
        except Exception as exc:  # noqa: BLE001
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug("%s %s failed: %s: %s", request.method, request.url, type(exc).__name__, exc)
            return HttpResponse(
                ok=False,
                elapsed_ms=elapsed_ms,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=categorize_exception(exc),
            )

    def close(self) -> None:
        self._client.close()
