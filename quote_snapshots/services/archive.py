"""Read, merge and write the timestamp-keyed quote archive."""

from __future__ import annotations

import json
from pathlib import Path

from quote_snapshots.schemas import ArchiveDocument, Snapshot

from .results import ArchiveDiscarded, ArchiveLoaded, ArchiveResult


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def read_archive(path: str | Path) -> ArchiveResult:
    """Load the archive at ``path``.

    A missing or blank file loads as an empty document. Content that is not
    UTF-8 encoded JSON object text is reported as discarded rather than raised.
    """

    target = Path(path)
    if not target.exists():
        return ArchiveLoaded({})
    try:
        text = target.read_text(encoding="utf-8")
        if not text.strip():
            return ArchiveLoaded({})
        payload = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        return ArchiveDiscarded(str(exc))
    if not isinstance(payload, dict):
        return ArchiveDiscarded(f"expected a JSON object, got {type(payload).__name__}")
    return ArchiveLoaded(payload)


def snapshot_records(snapshot: Snapshot) -> ArchiveDocument:
    return {label: [quote.to_record() for quote in quotes] for label, quotes in snapshot.items()}


def merge_snapshot(document: ArchiveDocument, snapshot: Snapshot) -> ArchiveDocument:
    """Overlay ``snapshot`` on ``document``; same-label entries are replaced whole."""

    merged: ArchiveDocument = dict(document)
    merged.update(snapshot_records(snapshot))
    return merged


def write_archive(path: str | Path, document: ArchiveDocument) -> None:
    content = json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)
    Path(path).write_text(content, encoding="utf-8")


__all__ = ["merge_snapshot", "read_archive", "snapshot_records", "write_archive"]
