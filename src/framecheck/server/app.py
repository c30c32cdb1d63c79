# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
HTTP surface of the proxy fetcher.

Handlers are plain ``def`` functions: the fetch is a blocking httpx call and the
ASGI server runs sync handlers in its thread pool, so one slow upstream does not
stall other requests.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response

from ..config import HttpSettings, load_http_settings
from ..errors import FrameCheckError, InvalidInputError, NetworkError
from ..http.client import HttpClient, create_default_http_client
from ..http.url import INVALID_URL_MESSAGE, MISSING_URL_MESSAGE, format_url, is_absolute_url
from ..models.check import CheckRequest
from ..probe import DirectProbe
from ..proxy.fetcher import FRAME_PERMISSIVE_HEADERS, ProxyFetcher
from ..version import __version__

logger = logging.getLogger(__name__)


def _is_true(value: str | None) -> bool:
    return value == "true"


def create_app(
    http_client: HttpClient | None = None,
    http_settings: HttpSettings | None = None,
    *,
    fetcher: ProxyFetcher | None = None,
    probe: DirectProbe | None = None,
) -> FastAPI:
    """Build the FastAPI app; pass ``http_client`` to share or stub the upstream transport."""
    settings = http_settings or load_http_settings()
    client = http_client or create_default_http_client(settings)
    fetcher = fetcher or ProxyFetcher(client, settings)
    probe = probe or DirectProbe(client, settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        if hasattr(client, "close"):
            client.close()

    app = FastAPI(title="framecheck", version=__version__, lifespan=lifespan)
    app.state.fetcher = fetcher
    app.state.probe = probe

    @app.exception_handler(FrameCheckError)
    async def _frame_check_error(_request: Request, exc: FrameCheckError) -> JSONResponse:
        return JSONResponse(exc.to_payload(), status_code=exc.status_code)

    @app.get("/proxy")
    def proxy(
        url: str | None = Query(None),
        anonymous_mode: str | None = Query(None, alias="anonymousMode"),
        fake_ip: str | None = Query(None, alias="fakeIp"),
    ) -> Response:
        request = CheckRequest(
            target_url=url or "",
            anonymous_mode=_is_true(anonymous_mode),
            fake_ip=_is_true(fake_ip),
        )
        try:
            result = app.state.fetcher.fetch(request)
        except FrameCheckError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected proxy failure for %s", url)
            raise NetworkError(str(exc) or "Unknown error") from exc

        return Response(
            content=result.body,
            status_code=200,
            media_type=result.content_type,
            headers=dict(FRAME_PERMISSIVE_HEADERS),
        )

    @app.get("/probe")
    def run_probe(
        url: str | None = Query(None),
        user_agent: str | None = Query(None, alias="userAgent"),
    ) -> JSONResponse:
        target = format_url(url)
        if not target:
            raise InvalidInputError(MISSING_URL_MESSAGE)
        if not is_absolute_url(target):
            raise InvalidInputError(INVALID_URL_MESSAGE)
        result = app.state.probe.run(target, user_agent=user_agent or None)
        return JSONResponse(result.to_dict())

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app


__all__ = ["create_app"]
