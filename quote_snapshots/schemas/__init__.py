"""Pydantic schemas for quotes and archive documents."""

from .quotes import ArchiveDocument, Quote, Snapshot

__all__ = ["ArchiveDocument", "Quote", "Snapshot"]
