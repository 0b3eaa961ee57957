"""
CLI entry point for the chart drawings client.

Usage:
    tv-drawings LAYOUT_ID                          # list drawings + summary
    tv-drawings LAYOUT_ID --symbol BINANCE:BTCUSDT # server-side symbol filter
    tv-drawings LAYOUT_ID --user-id 12345          # private layouts
    tv-drawings LAYOUT_ID --raw                    # dump raw sources as JSON

Credentials are read from ``TV_SESSION`` / ``TV_SIGNATURE`` (``.env`` works).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from tv_drawings.data.models import Credentials, ParsedDrawingsResponse
from tv_drawings.data.services.layout import fetch_layout_drawings
from tv_drawings.errors import DrawingsError
from tv_drawings.infra.config import get_settings
from tv_drawings.parser import DrawingParser


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List the drawings saved on a chart layout",
    )
    parser.add_argument("layout_id", help="Layout id (from the chart URL)")
    parser.add_argument("--symbol", default="", help="Only drawings on this symbol")
    parser.add_argument("--chart-id", default=None, help="Chart id (default: _shared)")
    parser.add_argument(
        "--user-id", type=int, default=None,
        help="Numeric user id, needed for private layouts",
    )
    parser.add_argument(
        "--raw", action="store_true",
        help="Print the raw sources as JSON instead of a listing",
    )
    return parser.parse_args(argv)


def _print_listing(result: ParsedDrawingsResponse) -> None:
    print(f"Found {len(result.drawings)} drawings:")
    for drawing in result.drawings:
        print(f"- {drawing.id}: {drawing.type} ({drawing.symbol})")
        if drawing.text:
            print(f"  Text: {drawing.text}")
        if drawing.title:
            print(f"  Title: {drawing.title}")
        print(f"  Points: {len(drawing.points)}")
        print(f"  Visible: {drawing.visible}, Frozen: {drawing.frozen}")
        if drawing.groupId:
            print(f"  Group: {drawing.groupId}")
        print("---")

    if result.groups:
        print(f"\nFound {len(result.groups)} groups:")
        for group in result.groups:
            print(f"- {group.id}: {group.name} ({group.symbol})")

    summary = DrawingParser.get_summary(result.drawings)
    print(
        f"\nSummary: total={summary.total} visible={summary.visible} "
        f"frozen={summary.frozen} grouped={summary.grouped}"
    )
    for drawing_type, count in summary.typeCount.items():
        print(f"  {drawing_type}: {count}")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    credentials = Credentials.from_settings(settings)
    if args.user_id is not None:
        credentials = credentials.model_copy(update={"id": args.user_id})

    try:
        result = fetch_layout_drawings(
            args.layout_id,
            symbol=args.symbol,
            credentials=credentials,
            chart_id=args.chart_id,
            parse=not args.raw,
        )
    except DrawingsError as exc:
        print(f"❌ {type(exc).__name__}: {exc}")
        sys.exit(1)

    if args.raw:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        _print_listing(result)


if __name__ == "__main__":
    main()
