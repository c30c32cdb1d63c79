# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Direct probe result model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory, error_category_to_reason

HEADER_PREVIEW_LIMIT = 10


@dataclass
class ProbeResult:
    url: str
    status_code: int | None = None
    status_text: str = ""
    elapsed_ms: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    final_url: str | None = None
    error: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def accessible(self) -> bool:
        """True when the site answered with a 2xx or 3xx status."""
        return self.error is None and self.status_code is not None and 200 <= self.status_code < 400

    @property
    def reason(self) -> str:
        return error_category_to_reason(self.error_category) if self.error else ""

    def header_preview(self, limit: int = HEADER_PREVIEW_LIMIT) -> list[tuple[str, str]]:
        return list(self.headers.items())[: max(0, limit)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "final_url": self.final_url,
            "status": self.status_code,
            "status_text": self.status_text,
            "load_time_ms": self.elapsed_ms,
            "accessible": self.accessible,
            "headers": dict(self.headers),
            "error": self.error,
            "error_category": self.error_category.value,
            "reason": self.reason,
        }
