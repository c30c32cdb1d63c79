# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""framecheck CLI."""

from __future__ import annotations

import argparse
import json
import sys
import webbrowser
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import FrameCheckError
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import CheckerSettings, CheckReport
from ..runtime import FrameCheck
from ..viewer import visit_with_delay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check a website's status and preview it through the framing proxy")
    parser.add_argument("url", help="Target URL (scheme optional, https:// is assumed)")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of human-friendly summary")
    parser.add_argument("--anonymous", action="store_true", help="Send loopback X-Forwarded-For/X-Real-IP on proxied fetches")
    parser.add_argument("--fake-ip", action="store_true", help="Send a random X-Forwarded-For on proxied fetches")
    parser.add_argument("--user-agent", default="", help="Custom User-Agent for the probe and the proxied fetch")
    parser.add_argument("--width", type=int, default=CheckerSettings.display_width, help="Preview width in pixels")
    parser.add_argument("--height", type=int, default=CheckerSettings.display_height, help="Preview height in pixels")
    parser.add_argument("--device", choices=["desktop", "tablet", "mobile"], default="desktop", help="Device mode")
    parser.add_argument("--fetch", action="store_true", help="Also fetch the page through the proxy and report the result")
    parser.add_argument("--visit", action="store_true", help="Open the page in the system browser after checking")
    parser.add_argument("--delay", type=int, default=None, metavar="SECONDS", help="Countdown before --visit (1-60)")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> CheckerSettings:
    changes: dict[str, Any] = {
        "display_width": args.width,
        "display_height": args.height,
        "device_mode": args.device,
        "anonymous_mode": args.anonymous,
        "fake_ip": args.fake_ip,
        "user_agent": args.user_agent,
    }
    if args.delay is not None:
        changes["delay_mode"] = True
        changes["delay_seconds"] = args.delay
    return CheckerSettings.reset().update(**changes)


def _print_json(data: dict[str, Any]) -> None:
    json.dump(data, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(report: CheckReport, fetch_summary: dict[str, Any] | None) -> None:
    probe = report.probe
    settings = report.settings
    print(f"[framecheck] {report.url}")
    if probe.error:
        print(f"Connection failed: {probe.error}")
        if probe.reason:
            print(f"Reason: {probe.reason}")
    else:
        label = "Website accessible" if probe.accessible else "Status warning"
        print(f"{label}: {probe.status_code} {probe.status_text}".rstrip())
        print(f"Load time: {probe.elapsed_ms}ms")
        preview = probe.header_preview()
        if preview:
            print("Response headers:")
            for key, value in preview:
                print(f"  {key}: {value}")
    print(f"Preview: {report.frame_src} ({report.frame_width}x{report.frame_height})")
    print(
        f"Settings: device={settings.device_mode.value} "
        f"display={settings.display_width}x{settings.display_height} "
        f"anonymous={'ON' if settings.anonymous_mode else 'OFF'} "
        f"fake_ip={'ON' if settings.fake_ip else 'OFF'}"
        + (f" delay={settings.delay_seconds}s" if settings.delay_mode else "")
    )
    if fetch_summary is not None:
        if fetch_summary.get("error"):
            print(f"Proxy fetch: {fetch_summary['status']} {fetch_summary['error']}")
        else:
            print(
                f"Proxy fetch: {fetch_summary['status']} ({fetch_summary['bytes']} bytes, "
                f"declared {fetch_summary['declared_content_type']})"
            )


def _fetch_summary(guard: FrameCheck, url: str, settings: CheckerSettings) -> dict[str, Any]:
    try:
        result = guard.fetch(settings.to_check_request(url))
    except FrameCheckError as exc:
        return {"status": exc.status_code, "error": exc.message}
    return {
        "status": result.upstream_status,
        "bytes": len(result.body.encode("utf-8")),
        "declared_content_type": result.declared_content_type,
        "final_url": result.final_url,
    }


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        checker_settings = settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    http_client = create_default_http_client(settings)

    with FrameCheck(http_client=http_client, http_settings=settings) as guard:
        try:
            report = guard.check(args.url, checker_settings)
        except FrameCheckError as exc:
            print(exc.message, file=sys.stderr)
            return 2
        fetch_summary = _fetch_summary(guard, report.url, checker_settings) if args.fetch else None

    if args.json:
        payload = report.to_dict()
        if fetch_summary is not None:
            payload["proxy"] = fetch_summary
        _print_json(payload)
    else:
        _pretty_print(report, fetch_summary)

    if args.visit:
        visit_with_delay(
            report.url,
            checker_settings,
            webbrowser.open,
            on_tick=lambda remaining: print(f"Opening in {remaining}s...", file=sys.stderr) if remaining else None,
        )

    return 0 if report.probe.error is None else 1


if __name__ == "__main__":
    raise SystemExit(main())
