# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Checker settings.

Settings are an immutable value handed to each check explicitly. Editing them
produces a new instance; in-flight checks keep the snapshot they were built from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any

from .check import CheckRequest

MIN_DISPLAY_WIDTH, MAX_DISPLAY_WIDTH = 320, 1920
MIN_DISPLAY_HEIGHT, MAX_DISPLAY_HEIGHT = 480, 1440
MIN_DELAY_SECONDS, MAX_DELAY_SECONDS = 1, 60

# camelCase keys used by the settings UI and the proxy query string.
_CAMEL_KEYS = {
    "displayWidth": "display_width",
    "displayHeight": "display_height",
    "deviceMode": "device_mode",
    "anonymousMode": "anonymous_mode",
    "fakeIp": "fake_ip",
    "delayMode": "delay_mode",
    "delaySeconds": "delay_seconds",
    "darkMode": "dark_mode",
    "userAgent": "user_agent",
}


class DeviceMode(str, Enum):
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class CheckerSettings:
    display_width: int = 1024
    display_height: int = 768
    device_mode: DeviceMode = DeviceMode.DESKTOP
    anonymous_mode: bool = False
    fake_ip: bool = False
    delay_mode: bool = False
    delay_seconds: int = 10
    dark_mode: bool = False
    user_agent: str = ""

    def __post_init__(self) -> None:
        _check_range("display_width", self.display_width, MIN_DISPLAY_WIDTH, MAX_DISPLAY_WIDTH)
        _check_range("display_height", self.display_height, MIN_DISPLAY_HEIGHT, MAX_DISPLAY_HEIGHT)
        _check_range("delay_seconds", self.delay_seconds, MIN_DELAY_SECONDS, MAX_DELAY_SECONDS)
        if not isinstance(self.device_mode, DeviceMode):
            try:
                object.__setattr__(self, "device_mode", DeviceMode(str(self.device_mode).lower()))
            except ValueError as exc:
                raise ValueError(f"Unknown device mode: {self.device_mode!r}") from exc

    def update(self, **changes: Any) -> CheckerSettings:
        """Return a validated copy with ``changes`` applied (last write wins)."""
        return replace(self, **changes)

    @classmethod
    def reset(cls) -> CheckerSettings:
        return cls()

    def to_check_request(self, target_url: str) -> CheckRequest:
        return CheckRequest(
            target_url=target_url,
            anonymous_mode=self.anonymous_mode,
            fake_ip=self.fake_ip,
            user_agent=self.user_agent.strip() or None,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CheckerSettings:
        """Build settings from snake_case or camelCase keys; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known:
                values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["device_mode"] = self.device_mode.value
        by_name = {snake: camel for camel, snake in _CAMEL_KEYS.items()}
        return {by_name[key]: value for key, value in data.items()}


DEFAULT_SETTINGS = CheckerSettings()
