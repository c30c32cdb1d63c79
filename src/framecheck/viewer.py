# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Helpers for the embedded preview and the delayed visit action."""

from __future__ import annotations

import time
from collections.abc import Callable
from urllib.parse import urlencode

from .http.url import format_url
from .models.settings import CheckerSettings

MIN_FRAME_HEIGHT = 600


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_proxy_url(target_url: str, settings: CheckerSettings, base: str = "/proxy") -> str:
    """Frame source pointing at the proxy endpoint for ``target_url``."""
    query = urlencode(
        {
            "url": target_url,
            "anonymousMode": _flag(settings.anonymous_mode),
            "fakeIp": _flag(settings.fake_ip),
        }
    )
    return f"{base}?{query}"


def frame_size(settings: CheckerSettings) -> tuple[int, int]:
    return settings.display_width, max(settings.display_height, MIN_FRAME_HEIGHT)


def visit_with_delay(
    url: str,
    settings: CheckerSettings,
    open_url: Callable[[str], object],
    *,
    sleep: Callable[[float], object] = time.sleep,
    on_tick: Callable[[int], object] | None = None,
) -> str | None:
    """
    Open ``url`` after the configured countdown.

    Returns the formatted URL that was opened, or None for empty input. The
    countdown runs before the URL is checked, matching the visit button.
    """
    if settings.delay_mode:
        for remaining in range(settings.delay_seconds, 0, -1):
            if on_tick is not None:
                on_tick(remaining)
            sleep(1)
        if on_tick is not None:
            on_tick(0)

    target = format_url(url)
    if not target:
        return None
    open_url(target)
    return target


__all__ = ["MIN_FRAME_HEIGHT", "build_proxy_url", "frame_size", "visit_with_delay"]
