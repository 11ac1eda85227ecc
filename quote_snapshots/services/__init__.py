"""Collection and archive services."""

from .collector import QuoteSnapshotCollector

__all__ = ["QuoteSnapshotCollector"]
