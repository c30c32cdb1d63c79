# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outbound header synthesis for proxied fetches."""

from __future__ import annotations

import random

from ..config import DEFAULT_USER_AGENT
from ..models.check import CheckRequest

LOOPBACK_ADDRESS = "127.0.0.1"
FORWARDED_FOR = "X-Forwarded-For"
REAL_IP = "X-Real-IP"

# Each draw reads from the OS entropy pool; there is no seed to reuse.
_system_random = random.SystemRandom()


def random_ipv4(rng: random.Random | None = None) -> str:
    """Four independent uniform octets, 0-255, joined by dots."""
    source = rng or _system_random
    return ".".join(str(source.randint(0, 255)) for _ in range(4))


def synthesize_headers(
    request: CheckRequest,
    *,
    default_user_agent: str = DEFAULT_USER_AGENT,
    rng: random.Random | None = None,
) -> dict[str, str]:
    """
    Build the header set for one proxied GET.

    anonymous_mode pins both IP headers to loopback; fake_ip then overwrites
    X-Forwarded-For with a fresh random address, leaving X-Real-IP alone.
    """
    headers = {"User-Agent": request.user_agent or default_user_agent}

    if request.anonymous_mode:
        headers[FORWARDED_FOR] = LOOPBACK_ADDRESS
        headers[REAL_IP] = LOOPBACK_ADDRESS

    if request.fake_ip:
        headers[FORWARDED_FOR] = random_ipv4(rng)

    return headers


__all__ = ["FORWARDED_FOR", "LOOPBACK_ADDRESS", "REAL_IP", "random_ipv4", "synthesize_headers"]
