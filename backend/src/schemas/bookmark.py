"""Pydantic schemas for bookmark endpoints."""
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


# Order in which fields are checked; the first failing field is reported.
BOOKMARK_FIELDS = ("title", "url", "rating", "description")


class BookmarkPayload(BaseModel):
    """
    Request body as submitted by the client, before validation.

    Fields are deliberately loose (`Any`) so that missing, empty and
    malformed values all reach the validation rules in
    services/validation.py, which report them with field-specific messages
    in a fixed order. Unknown keys (including a client-supplied `id`) are
    dropped.
    """

    model_config = ConfigDict(extra="ignore")

    title: Any = None
    url: Any = None
    rating: Any = None
    description: Any = None


class BookmarkCreate(BaseModel):
    """A fully validated new bookmark, ready for insertion."""

    # Stored exactly as submitted (not the normalized HttpUrl form)
    url: str
    title: str
    rating: int
    description: str


class BookmarkUpdate(BaseModel):
    """A validated partial update; fields left as None are not changed."""

    title: str | None = None
    url: str | None = None
    rating: int | None = None
    description: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields to overwrite."""
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class BookmarkRecord:
    """
    A bookmark row as returned by a store.

    Decoupled from the ORM so SQL and in-memory stores hand back the same
    type. Values are raw (unsanitized) until passed through
    services.sanitization.sanitize_bookmark.
    """

    id: int
    title: str
    url: str
    rating: int
    description: str


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses (always built from a sanitized record)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    rating: int
    description: str


class ErrorDetail(BaseModel):
    """Error message wrapper."""

    message: str


class ErrorResponse(BaseModel):
    """Shape shared by every error body: `{"error": {"message": ...}}`."""

    error: ErrorDetail
