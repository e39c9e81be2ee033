"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line interface for the what3words client.

Usage:
  # Three words → position
  python -m w3w.interfaces.cli --words prom.cape.pump

  # Position → three words, German, with the cell's corners
  python -m w3w.interfaces.cli --position 51.484463,-0.195405 --lang de --corners

  # Negative latitude: use the = form so argparse does not read it as a flag
  python -m w3w.interfaces.cli --position=-33.856784,151.215297

  # Languages available for an address
  python -m w3w.interfaces.cli --words prom.cape.pump --languages

  # JSON output
  python -m w3w.interfaces.cli --words prom.cape.pump --json

  # Via installed entry-point (pyproject.toml [project.scripts])
  w3w-lookup --words prom.cape.pump

The API key is read from W3W_API_KEY (environment or .env).  Passing --lang
or --corners sends those options instead of the configured defaults.

Exit codes:
  0 — success
  1 — fatal error (missing key, transport, decode, service)
  2 — argument error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from w3w.config.settings import get_settings
from w3w.domain.exceptions import W3WError
from w3w.domain.models import (
    CallOptions,
    Coordinate,
    LanguageList,
    PositionResult,
    ThreeWordAddress,
)
from w3w.services.container import get_client

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="w3w-lookup",
        description="Translate between three-word addresses and coordinates.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    target = p.add_mutually_exclusive_group()
    target.add_argument(
        "--words", "-w",
        metavar="W1.W2.W3",
        help="Three-word address to resolve.",
    )
    target.add_argument(
        "--position", "-p",
        metavar="LAT,LNG",
        help="Latitude,longitude to resolve.",
    )
    p.add_argument(
        "--languages",
        action="store_true",
        help="List the languages available for the address/position instead.",
    )
    p.add_argument(
        "--lang", "-l",
        metavar="CODE",
        help="Response language code. (default: configured W3W_LANG)",
    )
    p.add_argument(
        "--corners",
        action="store_true",
        help="Include the cell's south-west / north-east corners.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


# ── Formatting helpers ─────────────────────────────────────────────────────

def _print_position_text(result: PositionResult) -> None:
    """Pretty-print a PositionResult to stdout."""
    print(f"\n{'─' * 60}")
    print(f"Words    : {result.words}")
    print(f"Position : {result.position.lat}, {result.position.lng}")
    if result.corners:
        print(f"SW       : {result.corners.sw.lat}, {result.corners.sw.lng}")
        print(f"NE       : {result.corners.ne.lat}, {result.corners.ne.lng}")
    print(f"Language : {result.language}  |  Type: {result.type}")
    print()


def _print_languages_text(result: LanguageList) -> None:
    print(f"\n{'─' * 60}")
    for entry in result.languages:
        print(f"  {entry.code:<6} {entry.name}")
    print(f"{len(result)} language(s)\n")


# ── Main logic ─────────────────────────────────────────────────────────────

def _parse_position(text: str) -> Coordinate:
    parts = [part.strip() for part in text.split(",")]
    return Coordinate.model_validate(parts)


def _call_options(args: argparse.Namespace) -> Optional[CallOptions]:
    """Per-call options, or None to fall back to the configured defaults.

    A missing --lang is filled from W3W_LANG.
    """
    if args.lang is None and not args.corners:
        return None
    return CallOptions(
        lang=args.lang or get_settings().default_lang,
        corners=args.corners,
    )


def run(args: argparse.Namespace) -> int:
    """Execute one lookup for the given arguments.

    Returns:
        Exit code (0 = success, 1 = error, 2 = bad arguments).
    """
    try:
        address = ThreeWordAddress.parse(args.words) if args.words else None
        coord = _parse_position(args.position) if args.position else None
    except ValidationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if address is None and coord is None:
        print("ERROR: provide --words or --position", file=sys.stderr)
        return 2

    opts = _call_options(args)

    try:
        client = get_client()
        if args.languages:
            result = (
                client.languages_for_address(address, opts)
                if address is not None
                else client.languages_for_position(coord, opts)
            )
        else:
            result = (
                client.lookup_by_address(address, opts)
                if address is not None
                else client.lookup_by_position(coord, opts)
            )
    except W3WError as exc:
        logger.debug("Lookup failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.json_output:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif isinstance(result, LanguageList):
        _print_languages_text(result)
    else:
        _print_position_text(result)
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the w3w-lookup console script."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    if not args.words and not args.position:
        parser.print_help()
        sys.exit(2)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
