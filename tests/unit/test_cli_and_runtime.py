# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from framecheck.cli.main import build_parser, settings_from_args
from framecheck.config import HttpSettings
from framecheck.errors import InvalidInputError
from framecheck.http import StubHttpClient
from framecheck.http.models import HttpResponse
from framecheck.models import CheckerSettings, CheckReport, ProbeResult, ProxyResponse
from framecheck.runtime import FrameCheck


def test_build_parser_and_settings_from_args():
    parser = build_parser()
    args = parser.parse_args(["example.com", "--json", "--fake-ip", "--delay", "5", "--device", "mobile"])
    assert args.url == "example.com"
    assert args.json is True

    settings = settings_from_args(args)
    assert settings.fake_ip is True
    assert settings.anonymous_mode is False
    assert settings.delay_mode is True
    assert settings.delay_seconds == 5
    assert settings.device_mode.value == "mobile"


def test_runtime_check_combines_probe_and_viewer_details():
    stub = StubHttpClient({"https://example.com": HttpResponse(ok=True, status_code=200, headers={"Server": "x"})})
    settings = CheckerSettings(fake_ip=True, display_height=500)

    with FrameCheck(http_client=stub, http_settings=HttpSettings()) as guard:
        report = guard.check("example.com", settings)

    assert report.url == "https://example.com"
    assert report.probe.status_code == 200
    assert report.frame_src.startswith("/proxy?url=https%3A%2F%2Fexample.com")
    assert "fakeIp=true" in report.frame_src
    assert (report.frame_width, report.frame_height) == (1024, 600)
    data = report.to_dict()
    assert data["probe"]["status"] == 200
    assert data["settings"]["fakeIp"] is True
    assert stub.closed is True


def test_runtime_check_requires_url():
    with pytest.raises(InvalidInputError):
        FrameCheck(http_client=StubHttpClient(), http_settings=HttpSettings()).check("   ")


def test_runtime_fetch_url_formats_input_and_shares_client():
    stub = StubHttpClient({"https://example.com": HttpResponse(ok=True, status_code=200, text="<p>x</p>")})
    guard = FrameCheck(http_client=stub, http_settings=HttpSettings())

    result = guard.fetch_url("example.com", CheckerSettings(anonymous_mode=True))

    assert result.body == "<p>x</p>"
    assert stub.requests[0].headers["X-Real-IP"] == "127.0.0.1"
    assert guard.fetcher.http_client is guard.probe_engine.http_client


class FakeGuard:
    instances: list["FakeGuard"] = []

    def __init__(self, http_client=None, http_settings=None):  # noqa: ARG002
        self.fetched = []
        FakeGuard.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *_):
        return None

    def check(self, url, settings):
        return CheckReport(
            url="https://" + url,
            probe=ProbeResult(url="https://" + url, status_code=200, status_text="OK", elapsed_ms=42, headers={"server": "t"}),
            frame_src="/proxy?url=x",
            frame_width=settings.display_width,
            frame_height=600,
            settings=settings,
        )

    def fetch(self, request):
        self.fetched.append(request)
        return ProxyResponse(body="héllo", declared_content_type="text/plain", final_url=request.target_url)


def test_cli_main_json_output(monkeypatch, capsys):
    from framecheck.cli import main as cli_main

    monkeypatch.setattr(cli_main, "FrameCheck", FakeGuard)
    exit_code = cli_main.main(["example.com", "--json", "--fetch", "--anonymous"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["url"] == "https://example.com"
    assert payload["probe"]["load_time_ms"] == 42
    assert payload["proxy"]["bytes"] == len("héllo".encode("utf-8"))
    assert payload["proxy"]["declared_content_type"] == "text/plain"
    assert FakeGuard.instances[-1].fetched[0].anonymous_mode is True


def test_cli_main_pretty_output(monkeypatch, capsys):
    from framecheck.cli import main as cli_main

    monkeypatch.setattr(cli_main, "FrameCheck", FakeGuard)
    assert cli_main.main(["example.com", "--width", "800"]) == 0
    output = capsys.readouterr().out
    assert "Website accessible: 200 OK" in output
    assert "Load time: 42ms" in output
    assert "server: t" in output
    assert "display=800x768" in output


def test_cli_visit_uses_browser(monkeypatch, capsys):
    from framecheck.cli import main as cli_main

    opened = []
    monkeypatch.setattr(cli_main, "FrameCheck", FakeGuard)
    monkeypatch.setattr(cli_main.webbrowser, "open", opened.append)
    assert cli_main.main(["example.com", "--visit"]) == 0
    assert opened == ["https://example.com"]
    capsys.readouterr()


def test_cli_rejects_invalid_settings(capsys):
    from framecheck.cli import main as cli_main

    with pytest.raises(SystemExit):
        cli_main.main(["example.com", "--delay", "120"])
    assert "delay_seconds" in capsys.readouterr().err
