"""Pydantic request/response schemas for the Reviews API.

Field names follow the wire contract (``productId``) while the domain model
uses snake_case. Entry dates are rendered as ``yyyy-MM-dd'T'HH:mm:ss.SSS+0000``
in UTC; dates sent by clients are accepted and ignored.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def format_date(value: datetime | None) -> str | None:
    """Render a timestamp in the wire format, always in UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}+0000"


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ReviewEntryRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    review: str | None = None
    date: str | None = None  # Overwritten server-side


class ReviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    product_id: int = Field(alias="productId")
    version: int | None = None  # Ignored; save always starts at 1
    entries: list[ReviewEntryRequest] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewEntryResponse(BaseModel):
    username: str
    date: str | None = None
    review: str | None = None

    @classmethod
    def from_entry(cls, entry) -> ReviewEntryResponse:
        return cls(username=entry.username, date=format_date(entry.date), review=entry.review)


class ReviewResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    product_id: int = Field(serialization_alias="productId", validation_alias="productId")
    version: int
    entries: list[ReviewEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_review(cls, review) -> ReviewResponse:
        return cls(
            id=str(review.id),
            product_id=review.product_id,
            version=review.version,
            entries=[ReviewEntryResponse.from_entry(entry) for entry in review.entries],
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
