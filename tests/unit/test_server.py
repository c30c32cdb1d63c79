# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
from fastapi.testclient import TestClient

from framecheck.config import HttpSettings
from framecheck.http import create_default_http_client
from framecheck.server import create_app


class Upstream:
    """MockTransport handler that records what the proxy sent upstream."""

    def __init__(self, status_code=200, *, headers=None, text="<h1>ok</h1>", error=None):
        self.status_code = status_code
        self.headers = headers if headers is not None else {"Content-Type": "text/html"}
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, headers=self.headers, text=self.text)


def _test_client(upstream: Upstream, **overrides) -> TestClient:
    settings = HttpSettings(**overrides)
    client = create_default_http_client(settings, transport=httpx.MockTransport(upstream))
    return TestClient(create_app(client, settings))


def test_proxy_returns_body_with_framing_headers():
    upstream = Upstream()
    resp = _test_client(upstream).get("/proxy", params={"url": "https://example.com/"})

    assert resp.status_code == 200
    assert resp.text == "<h1>ok</h1>"
    assert resp.headers["content-type"] == "text/html; charset=utf-8"
    assert resp.headers["x-frame-options"] == "ALLOWALL"
    assert resp.headers["content-security-policy"] == "frame-ancestors *"
    assert upstream.requests[0].method == "GET"


def test_proxy_requires_url_parameter():
    upstream = Upstream()
    client = _test_client(upstream)

    for params in ({}, {"url": ""}):
        resp = client.get("/proxy", params=params)
        assert resp.status_code == 400
        assert resp.json() == {"error": "URL parameter is required"}
    assert upstream.requests == []


def test_proxy_rejects_unparseable_and_scheme_less_urls():
    upstream = Upstream()
    client = _test_client(upstream)

    for value in ("not a url", "example.com"):
        resp = client.get("/proxy", params={"url": value})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid URL format"}
    assert upstream.requests == []


def test_proxy_mirrors_upstream_failure_status():
    upstream = Upstream(404, text="nope")
    resp = _test_client(upstream).get("/proxy", params={"url": "https://example.com/missing"})

    assert resp.status_code == 404
    assert "404" in resp.json()["error"]
    assert resp.json() == {"error": "Failed to fetch: 404 Not Found"}


def test_proxy_reports_transport_errors_as_500():
    upstream = Upstream(error=httpx.ConnectError("Connection refused"))
    resp = _test_client(upstream).get("/proxy", params={"url": "https://down.example.com/"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Proxy error: Connection refused"}


def test_proxy_anonymous_mode_sends_loopback_headers():
    upstream = Upstream()
    resp = _test_client(upstream).get(
        "/proxy",
        params={"url": "https://example.com/", "anonymousMode": "true", "fakeIp": "false"},
    )

    assert resp.status_code == 200
    sent = upstream.requests[0].headers
    assert sent["x-forwarded-for"] == "127.0.0.1"
    assert sent["x-real-ip"] == "127.0.0.1"


def test_proxy_flags_require_literal_true():
    upstream = Upstream()
    _test_client(upstream).get("/proxy", params={"url": "https://example.com/", "anonymousMode": "1", "fakeIp": "yes"})

    sent = upstream.requests[0].headers
    assert "x-forwarded-for" not in sent
    assert "x-real-ip" not in sent


def test_proxy_fake_ip_differs_between_calls():
    upstream = Upstream()
    client = _test_client(upstream)
    for _ in range(3):
        client.get("/proxy", params={"url": "https://example.com/", "fakeIp": "true"})

    values = {request.headers["x-forwarded-for"] for request in upstream.requests}
    assert len(values) > 1


def test_probe_endpoint_formats_url_and_returns_json():
    upstream = Upstream(503, headers={"Server": "edge"}, text="")
    resp = _test_client(upstream).get("/probe", params={"url": "example.com", "userAgent": "Checker/1"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["url"] == "https://example.com"
    assert data["status"] == 503
    assert data["status_text"] == "Service Unavailable"
    assert data["accessible"] is False
    assert data["headers"]["server"] == "edge"
    assert upstream.requests[0].method == "HEAD"
    assert upstream.requests[0].headers["user-agent"] == "Checker/1"


def test_probe_endpoint_validates_input():
    client = _test_client(Upstream())
    assert client.get("/probe").status_code == 400
    resp = client.get("/probe", params={"url": "bad host.com"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid URL format"}


def test_healthz():
    assert _test_client(Upstream()).get("/healthz").json() == {"status": "ok"}
