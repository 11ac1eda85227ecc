"""Outcome types for the fallible collection steps.

Each step returns one of two variants instead of raising, so the collector
decides explicitly whether to keep a value or log and fall back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from quote_snapshots.schemas import ArchiveDocument, Quote


@dataclass(frozen=True)
class QuoteFetched:
    quote: Quote


@dataclass(frozen=True)
class QuoteAbsent:
    symbol: str
    reason: str
    # "warning" when the payload lacked a price, "error" when the request failed.
    severity: Literal["warning", "error"] = "warning"


QuoteResult = Union[QuoteFetched, QuoteAbsent]


@dataclass(frozen=True)
class ArchiveLoaded:
    document: ArchiveDocument = field(default_factory=dict)


@dataclass(frozen=True)
class ArchiveDiscarded:
    reason: str


ArchiveResult = Union[ArchiveLoaded, ArchiveDiscarded]


__all__ = [
    "ArchiveDiscarded",
    "ArchiveLoaded",
    "ArchiveResult",
    "QuoteAbsent",
    "QuoteFetched",
    "QuoteResult",
]
