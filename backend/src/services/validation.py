"""
Field rules for bookmarks submitted by clients.

Rules are checked in a fixed order and the first violation is raised as a
BookmarkValidationError; errors are never aggregated.

A field counts as supplied when it is not None, an empty string or False.
This is an explicit presence check rather than truthiness, so a rating of 0
is treated as supplied and then rejected by the range rule.
"""
import logging
import re
from typing import Any

from pydantic import HttpUrl, TypeAdapter, ValidationError

from core.errors import BookmarkValidationError
from schemas.bookmark import BOOKMARK_FIELDS, BookmarkCreate, BookmarkPayload, BookmarkUpdate

logger = logging.getLogger(__name__)

REQUIRED_MESSAGES = {
    "title": "Title is required.",
    "url": "URL is required.",
    "rating": "Rating is required.",
    "description": "Description is required.",
}
TEXT_MESSAGES = {
    "title": "Title must be text.",
    "description": "Description must be text.",
}
INVALID_URL_MESSAGE = "Not a valid URL."
INVALID_RATING_MESSAGE = "Rating must be a whole number between 1-5."
EMPTY_PATCH_MESSAGE = "Request body must contain title, url, rating, or description"

MIN_RATING = 1
MAX_RATING = 5

_http_url_adapter = TypeAdapter(HttpUrl)
# Scheme, "//" and a non-empty authority, written out literally
_WEB_URL_PREFIX = re.compile(r"^https?://[^/?#\s\\]+", re.IGNORECASE)
_INTEGER_STRING = re.compile(r"^\s*[+-]?\d+\s*$")


def is_supplied(value: Any) -> bool:
    """True when a field value was actually provided (0 counts, False does not)."""
    return value is not None and value != "" and value is not False


def is_web_url(value: Any) -> bool:
    """True for absolute http/https URLs with a host."""
    if not isinstance(value, str) or value != value.strip():
        return False
    if not _WEB_URL_PREFIX.match(value):
        return False
    try:
        _http_url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def coerce_rating(value: Any) -> int | None:
    """
    Coerce a submitted rating to an int in [1, 5].

    Accepts ints, integral floats (4.0) and integer strings ("4"). Returns
    None for anything else, including booleans and fractional values.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        rating = value
    elif isinstance(value, float) and value.is_integer():
        rating = int(value)
    elif isinstance(value, str) and _INTEGER_STRING.match(value):
        rating = int(value)
    else:
        return None
    if not MIN_RATING <= rating <= MAX_RATING:
        return None
    return rating


def _fail(message: str, field: str | None, value: Any = None) -> BookmarkValidationError:
    logger.error(
        "bookmark_validation_failed",
        extra={"field": field, "reason": message, "value": repr(value)[:200]},
    )
    return BookmarkValidationError(message, field=field)


def _check_field(field: str, value: Any) -> Any:
    """Apply the format rule for one supplied field and return the clean value."""
    if field == "url":
        if not is_web_url(value):
            raise _fail(INVALID_URL_MESSAGE, field, value)
        return value
    if field == "rating":
        rating = coerce_rating(value)
        if rating is None:
            raise _fail(INVALID_RATING_MESSAGE, field, value)
        return rating
    if not isinstance(value, str):
        raise _fail(TEXT_MESSAGES[field], field, value)
    return value


def validate_create(payload: BookmarkPayload) -> BookmarkCreate:
    """
    Validate a new bookmark.

    All four fields must be supplied (checked title -> url -> rating ->
    description) before any format rule runs; then each field's format is
    checked in the same order.
    """
    values = {field: getattr(payload, field) for field in BOOKMARK_FIELDS}
    for field in BOOKMARK_FIELDS:
        if not is_supplied(values[field]):
            raise _fail(REQUIRED_MESSAGES[field], field)

    clean = {field: _check_field(field, values[field]) for field in BOOKMARK_FIELDS}
    return BookmarkCreate(**clean)


def validate_update(payload: BookmarkPayload) -> BookmarkUpdate:
    """
    Validate a partial update.

    At least one field must be supplied. Supplied url and rating values get
    the same format rules as on create; unsupplied fields are left out.
    """
    supplied = {
        field: getattr(payload, field)
        for field in BOOKMARK_FIELDS
        if is_supplied(getattr(payload, field))
    }
    if not supplied:
        raise _fail(EMPTY_PATCH_MESSAGE, None)

    clean = {field: _check_field(field, value) for field, value in supplied.items()}
    return BookmarkUpdate(**clean)
