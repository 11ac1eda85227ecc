"""Alpha Vantage client used by the quote collector."""

from __future__ import annotations

from typing import Any

import httpx

from quote_snapshots.config import get_settings

BASE_URL = "https://www.alphavantage.co/query"

_ERROR_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageError(RuntimeError):
    """Raised when Alpha Vantage returns an error payload."""


class AlphaVantageClient:
    """Alpha Vantage client with convenience helpers."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        client: Any | None = None,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.alphavantage_api_key
        self._base_url = base_url or settings.alphavantage_base_url or BASE_URL
        self._timeout = timeout if timeout is not None else settings.alphavantage_timeout_seconds
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    async def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        query = dict(params)
        query["apikey"] = self._api_key
        response = await self._client.get(self._base_url, params=query, timeout=self._timeout)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise AlphaVantageError(f"Unexpected payload type: {type(payload).__name__}")
        for key in _ERROR_KEYS:
            if key in payload:
                raise AlphaVantageError(str(payload[key]))
        return payload

    async def global_quote(self, symbol: str) -> dict[str, Any]:
        """Return the raw GLOBAL_QUOTE payload for ``symbol``."""

        return await self._request({"function": "GLOBAL_QUOTE", "symbol": symbol})

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["AlphaVantageClient", "AlphaVantageError", "BASE_URL"]
