"""CLI wrapper for a single quote snapshot run."""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import datetime, timezone

from quote_snapshots.config import get_settings
from quote_snapshots.core.logging import setup_logging
from quote_snapshots.services import QuoteSnapshotCollector

logger = logging.getLogger("quote_snapshots.cli")


def default_time_tag(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch GLOBAL_QUOTE prices and merge them into a JSON archive")
    parser.add_argument(
        "--symbol",
        dest="symbols",
        action="append",
        help="Ticker symbol to collect; repeat for several (defaults to STOCK_SYMBOLS)",
    )
    parser.add_argument("--time-tag", help="Archive key for this run (defaults to the current UTC time)")
    parser.add_argument("--output", help="Archive file path (defaults to DATA_FILE_PATH)")
    parser.add_argument("--api-key", help="Alpha Vantage API key (defaults to ALPHAVANTAGE_API_KEY)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level.upper())
    logger.debug("Settings: %s", settings.dict_for_logging())

    time_tag = args.time_tag or default_time_tag()
    output = args.output or settings.data_file_path
    collector = QuoteSnapshotCollector(
        api_key=args.api_key or settings.alphavantage_api_key,
        stock_symbols=args.symbols or settings.stock_symbols,
        time_tag=time_tag,
        data_file_path=output,
    )
    asyncio.run(collector.collect_and_save())
    print(f"Saved quotes for {time_tag} to {output}")


if __name__ == "__main__":
    main()
