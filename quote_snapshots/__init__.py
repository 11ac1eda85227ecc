"""Timestamped stock quote snapshots merged into a JSON archive."""

from .schemas import Quote
from .services import QuoteSnapshotCollector

__all__ = ["Quote", "QuoteSnapshotCollector"]
