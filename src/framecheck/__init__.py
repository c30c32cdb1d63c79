# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
framecheck package entrypoint.

framecheck checks a website's status with a direct probe and re-serves its page
through a server-side proxy so it can be previewed inside a frame, optionally
with spoofed forwarding headers. HTTP behavior is abstracted behind an
injectable client interface, and domain objects are typed dataclasses.
"""

from .config import HttpSettings, ServerSettings, load_http_settings
from .errors import FrameCheckError, InvalidInputError, NetworkError, UpstreamError
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, create_default_http_client
from .log import setup_logging
from .models import CheckerSettings, CheckReport, CheckRequest, DeviceMode, ProbeResult, ProxyResponse
from .probe import DirectProbe
from .proxy import ProxyFetcher
from .runtime import FrameCheck
from .version import __version__

__all__ = [
    "CheckReport",
    "CheckRequest",
    "CheckerSettings",
    "DeviceMode",
    "DirectProbe",
    "FrameCheck",
    "FrameCheckError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "InvalidInputError",
    "NetworkError",
    "ProbeResult",
    "ProxyFetcher",
    "ProxyResponse",
    "ServerSettings",
    "UpstreamError",
    "create_default_http_client",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
