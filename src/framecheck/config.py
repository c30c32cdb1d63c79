# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for framecheck."""

import os
from dataclasses import dataclass

# Desktop browser identification sent by the proxy when no custom agent is set.
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
DEFAULT_MAX_BODY_BYTES = 16 * 1024 * 1024


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults shared by the proxy fetcher and the direct probe."""

    timeout: float = 10.0
    probe_timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("FRAMECHECK_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        timeout = _float_env("FRAMECHECK_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        probe_timeout = _float_env("FRAMECHECK_PROBE_TIMEOUT", cls.probe_timeout)
        if probe_timeout <= 0:
            probe_timeout = cls.probe_timeout
        return cls(
            timeout=timeout,
            probe_timeout=probe_timeout,
            user_agent=os.getenv("FRAMECHECK_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("FRAMECHECK_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("FRAMECHECK_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


@dataclass
class ServerSettings:
    """Bind address for the proxy service."""

    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "ServerSettings":
        port = _int_env("FRAMECHECK_PORT", cls.port)
        if not 0 < port < 65536:
            port = cls.port
        return cls(host=os.getenv("FRAMECHECK_HOST", cls.host), port=port)


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_server_settings() -> ServerSettings:
    return ServerSettings.from_env()
