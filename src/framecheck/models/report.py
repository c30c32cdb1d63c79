# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass for the combined check report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .probe import ProbeResult
from .settings import CheckerSettings


@dataclass
class CheckReport:
    url: str
    probe: ProbeResult
    frame_src: str
    frame_width: int
    frame_height: int
    settings: CheckerSettings

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "probe": self.probe.to_dict(),
            "viewer": {
                "frame_src": self.frame_src,
                "width": self.frame_width,
                "height": self.frame_height,
            },
            "settings": self.settings.to_dict(),
        }
