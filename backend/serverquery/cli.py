"""Query an Icarus dedicated server and print its status.

Usage:
    icarus-query HOST[:PORT] [--timeout SECONDS] [--log-dir DIR]

PORT is the Steam query port (default 27015). Exit status is 0 when every
query succeeded, 1 when any of them failed, 2 on invalid arguments.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TYPE_CHECKING

from pydantic import ValidationError

from serverquery.query.a2s_transport import A2STransport
from serverquery.query.aggregator import query_server
from serverquery.query.settings import QuerySettings
from serverquery.query.types import parse_endpoint
from serverquery.report.formatter import format_report
from shared.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

EXIT_OK = 0
EXIT_INCOMPLETE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="icarus-query",
        description="Query an Icarus dedicated server and print its status.",
    )
    parser.add_argument("server", help="server query address as HOST[:PORT]")
    parser.add_argument("--timeout", type=float, default=None, help="per-query timeout in seconds")
    parser.add_argument("--log-dir", default=None, help="also write logs to a timestamped file in this directory")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        endpoint = parse_endpoint(args.server)
    except ValueError as e:
        parser.error(str(e))

    overrides: dict[str, object] = {}
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.log_dir is not None:
        overrides["log_dir"] = args.log_dir
    try:
        settings = QuerySettings(**overrides)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(log_dir=settings.log_dir, stream=sys.stderr)

    transport = A2STransport(timeout=settings.timeout, encoding=settings.encoding)
    report = asyncio.run(query_server(endpoint, transport, settings))

    sys.stdout.write(format_report(report))
    return EXIT_OK if report.is_complete else EXIT_INCOMPLETE


if __name__ == "__main__":
    sys.exit(main())
