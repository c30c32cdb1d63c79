# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Proxy request/response models."""

from __future__ import annotations

from dataclasses import dataclass, field

PROXY_CONTENT_TYPE = "text/html; charset=utf-8"


@dataclass(frozen=True)
class CheckRequest:
    """One proxy fetch, built per user action from the current settings."""

    target_url: str
    anonymous_mode: bool = False
    fake_ip: bool = False
    user_agent: str | None = None


@dataclass
class ProxyResponse:
    body: str
    declared_content_type: str = ""
    upstream_status: int = 200
    content_type: str = PROXY_CONTENT_TYPE
    final_url: str | None = None
    request_headers: dict[str, str] = field(default_factory=dict)
