from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    """A single symbol's price at collection time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol_name: str = Field(..., alias="company name", examples=["AAPL"])
    price: float

    def to_record(self) -> dict[str, object]:
        """Return the archive representation of the quote."""

        return self.model_dump(by_alias=True)


# One run's quotes under its timestamp label.
Snapshot = dict[str, list[Quote]]

# Whole on-disk document. Values stay plain JSON so unknown entries survive a merge.
ArchiveDocument = dict[str, object]


__all__ = ["ArchiveDocument", "Quote", "Snapshot"]
