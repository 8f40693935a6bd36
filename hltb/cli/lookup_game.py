"""
Look up a game's completion times on HowLongToBeat and print them as JSON.

Usage:
    python -m hltb.cli.lookup_game "Metal Gear"
    python -m hltb.cli.lookup_game "Helldivers 2" --no-sandbox --verbose
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from hltb.errors import HLTBError
from hltb.services.lookup import lookup_sync

logger = logging.getLogger("LookupGame")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch HowLongToBeat completion times for a game")
    parser.add_argument("name", help="Game name to search for (first result is used)")
    parser.add_argument(
        "--no-sandbox",
        action="store_true",
        help="Launch Chromium without the OS sandbox (containers/CI only); defaults to HLTB_SANDBOXED",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        record = lookup_sync(args.name, sandboxed=False if args.no_sandbox else None)
    except HLTBError as exc:
        logger.error("Lookup failed for %r: %s", args.name, exc)
        return 1

    print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
