# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Frame-embedding proxy."""

from .fetcher import FRAME_PERMISSIVE_HEADERS, ProxyFetcher
from .headers import LOOPBACK_ADDRESS, random_ipv4, synthesize_headers

__all__ = [
    "FRAME_PERMISSIVE_HEADERS",
    "LOOPBACK_ADDRESS",
    "ProxyFetcher",
    "random_ipv4",
    "synthesize_headers",
]
