"""Collect one timestamped batch of quotes and merge it into a JSON archive."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

import httpx

from quote_snapshots.providers.alpha_vantage import AlphaVantageClient, AlphaVantageError
from quote_snapshots.schemas import Quote, Snapshot

from .archive import merge_snapshot, read_archive, write_archive
from .results import ArchiveDiscarded, QuoteAbsent, QuoteFetched, QuoteResult

logger = logging.getLogger(__name__)


def parse_global_quote(symbol: str, payload: dict[str, Any]) -> QuoteResult:
    """Turn a GLOBAL_QUOTE payload into a quote labelled with ``symbol``."""

    data = payload.get("Global Quote")
    if not isinstance(data, dict) or not data.get("05. price"):
        return QuoteAbsent(symbol, "missing Global Quote price")
    try:
        price = float(data["05. price"])
    except (TypeError, ValueError):
        return QuoteAbsent(symbol, f"unparsable price {data['05. price']!r}")
    if not math.isfinite(price):
        return QuoteAbsent(symbol, f"non-finite price {data['05. price']!r}")
    return QuoteFetched(Quote(symbol_name=symbol, price=price))


class QuoteSnapshotCollector:
    """Fetch quotes for a symbol list and save them under one time tag."""

    def __init__(
        self,
        api_key: str,
        stock_symbols: Sequence[str],
        time_tag: str,
        data_file_path: str,
        *,
        client: AlphaVantageClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._stock_symbols = list(stock_symbols)
        self._time_tag = time_tag
        self._data_file_path = data_file_path
        self._client = client

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[AlphaVantageClient]:
        if self._client is not None:
            yield self._client
            return
        client = AlphaVantageClient(self._api_key)
        try:
            yield client
        finally:
            await client.aclose()

    async def fetch_quote(self, symbol: str, client: AlphaVantageClient | None = None) -> QuoteResult:
        if client is None:
            async with self._client_scope() as scoped:
                return await self.fetch_quote(symbol, scoped)
        try:
            payload = await client.global_quote(symbol)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, AlphaVantageError, ValueError) as exc:
            return QuoteAbsent(symbol, str(exc) or type(exc).__name__, severity="error")
        return parse_global_quote(symbol, payload)

    async def build_snapshot(self) -> Snapshot:
        """Fetch every symbol concurrently and keep the successes in input order."""

        async with self._client_scope() as client:
            results = await asyncio.gather(*(self.fetch_quote(symbol, client) for symbol in self._stock_symbols))

        quotes: list[Quote] = []
        for result in results:
            if isinstance(result, QuoteFetched):
                quotes.append(result.quote)
            elif result.severity == "error":
                logger.error("Error fetching data for %s: %s", result.symbol, result.reason)
            else:
                logger.warning("No data found for %s", result.symbol)
        return {self._time_tag: quotes}

    def save_snapshot(self, snapshot: Snapshot) -> None:
        existing = read_archive(self._data_file_path)
        if isinstance(existing, ArchiveDiscarded):
            logger.error("Error parsing JSON from %s: %s", self._data_file_path, existing.reason)
            document = {}
        else:
            document = existing.document
        write_archive(self._data_file_path, merge_snapshot(document, snapshot))

    async def collect_and_save(self) -> None:
        """Fetch, format and save the quotes for the configured time tag."""

        snapshot = await self.build_snapshot()
        self.save_snapshot(snapshot)
        logger.info(
            "Saved %d of %d quotes under %s to %s",
            len(snapshot[self._time_tag]),
            len(self._stock_symbols),
            self._time_tag,
            self._data_file_path,
        )


__all__ = ["QuoteSnapshotCollector", "parse_global_quote"]
