# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for framecheck."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .check import PROXY_CONTENT_TYPE, CheckRequest, ProxyResponse
from .probe import ProbeResult
from .report import CheckReport
from .settings import DEFAULT_SETTINGS, CheckerSettings, DeviceMode

__all__ = [
    "DEFAULT_SETTINGS",
    "PROXY_CONTENT_TYPE",
    "CheckReport",
    "CheckRequest",
    "CheckerSettings",
    "DeviceMode",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeResult",
    "ProxyResponse",
]
