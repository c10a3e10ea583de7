#!/usr/bin/env python3
"""Print every envelope the relay broadcasts, like a dashboard would receive them."""

from __future__ import annotations

import sys
import asyncio
import logging
import argparse
from pathlib import Path

import websockets

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tests.client import RelayClient  # noqa: E402
from tests.params.env import derive_default_server  # noqa: E402
from tests.data.printing import dim, format_error, section_header, format_envelope  # noqa: E402


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Watch broadcasts from the transcription relay")
    p.add_argument("--server", default=derive_default_server(), help="host:port or ws://host:port")
    p.add_argument("--secure", action="store_true", help="Use wss://")
    p.add_argument("--duration", type=float, default=0.0, help="Seconds to watch (0 = until interrupted)")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


async def run(args: argparse.Namespace) -> int:
    client = RelayClient(args.server, args.secure)

    print(f"\n{section_header('WATCH')}")
    print(dim(f"  url: {client.url}"))
    print()

    try:
        await client.listen(duration_s=args.duration or None, on_message=lambda m: print(format_envelope(m)))
    except (OSError, websockets.exceptions.WebSocketException) as exc:
        print(format_error("Watch failed", str(exc)))
        return 2

    print(dim(f"\n  received={len(client.received)}"))
    return 0


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")
    try:
        raise SystemExit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        raise SystemExit(0) from None


if __name__ == "__main__":
    main()
