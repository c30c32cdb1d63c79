# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run the framecheck proxy service."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from ..config import load_server_settings
from ..log import setup_logging
from ..server import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = load_server_settings()
    parser = argparse.ArgumentParser(description="Serve the framecheck proxy endpoint")
    parser.add_argument("--host", default=defaults.host, help=f"Bind address (default: {defaults.host})")
    parser.add_argument("--port", type=int, default=defaults.port, help=f"Bind port (default: {defaults.port})")
    parser.add_argument("--log-level", default=None, help="Logging level (default: FRAMECHECK_LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    level_name = logging.getLevelName(logging.getLogger().getEffectiveLevel()).lower()
    logger.info("Serving framecheck proxy on http://%s:%s", args.host, args.port)
    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=level_name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
