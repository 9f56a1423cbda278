#!/usr/bin/env python3
"""Dump the stations table through the evconsole data layer.

Reads every station, optionally applies the list filters, and prints
either a text table or JSON. Useful to check what the console will show
without starting a UI.

Usage
-----
Set environment variables and run::

    export EVCONSOLE_SUPABASE_URL="https://xyz.supabase.co"
    export EVCONSOLE_SUPABASE_KEY="anon-key"
    python scripts/dump_stations.py

Options::

    --search TEXT        Case-insensitive match on name or location
    --status STATUS      all | Active | Inactive
    --connector TYPE     all | CCS | CHAdeMO | "Tesla Supercharger" | "Type 2"
    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from evconsole import ConsoleConfig, StationConsole, StationFilters  # noqa: E402
from evconsole._constants import FILTER_ALL  # noqa: E402
from evconsole.models.station import Station, StationStatus  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _format_station(station: Station) -> str:
    return (
        f"  {station.name:<32} {station.status.value:<9} {station.power_output:>5} kW  "
        f"{station.connector_type:<18} {station.location}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dump the charging stations table.")
    parser.add_argument("--search", default="", help="Case-insensitive match on name or location")
    parser.add_argument(
        "--status",
        default=FILTER_ALL,
        choices=[FILTER_ALL, *(status.value for status in StationStatus)],
        help="Status filter",
    )
    parser.add_argument("--connector", default=FILTER_ALL, help="Connector type or 'all'")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


async def main() -> int:
    args = build_parser().parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = ConsoleConfig.from_env()
    filters = StationFilters(search_term=args.search, status=args.status, connector=args.connector)

    async with StationConsole.connect(config) as console:
        console.list_view.set_search_term(filters.search_term)
        console.list_view.set_status_filter(filters.status)
        console.list_view.set_connector_filter(filters.connector)
        screen = await console.list_screen()

    if screen.error_title is not None:
        print(f"{screen.error_title}. {screen.error_hint}", file=sys.stderr)
        return 1

    if args.json_mode:
        result: dict[str, Any] = {
            "filters": filters.model_dump(),
            "count": len(screen.stations),
            "stations": [station.model_dump(mode="json") for station in screen.stations],
        }
        payload = json.dumps(result, indent=2, ensure_ascii=False)
    else:
        out = [_section(f"STATIONS  {screen.summary}")]
        out.extend(_format_station(station) for station in screen.stations)
        if screen.empty_text:
            out.append(f"  {screen.empty_text}")
        payload = "\n".join(out)

    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Output written to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
