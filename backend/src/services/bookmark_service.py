"""Service layer for bookmark operations."""
import logging

from schemas.bookmark import BookmarkPayload, BookmarkRecord
from services.bookmark_store import BookmarkStore
from services.sanitization import sanitize_bookmark
from services.validation import validate_create, validate_update

logger = logging.getLogger(__name__)


async def get_bookmarks(store: BookmarkStore) -> list[BookmarkRecord]:
    """Return every bookmark, sanitized."""
    return [sanitize_bookmark(b) for b in await store.list_all()]


async def get_bookmark(store: BookmarkStore, bookmark_id: int) -> BookmarkRecord | None:
    """Return one sanitized bookmark, or None if it doesn't exist."""
    bookmark = await store.get_by_id(bookmark_id)
    if bookmark is None:
        return None
    return sanitize_bookmark(bookmark)


async def create_bookmark(store: BookmarkStore, payload: BookmarkPayload) -> BookmarkRecord:
    """
    Validate and insert a new bookmark.

    Raises BookmarkValidationError before touching the store if any field
    rule fails. Returns the sanitized record, including its new id.
    """
    data = validate_create(payload)
    bookmark = await store.insert(data)
    logger.info("bookmark_created", extra={"bookmark_id": bookmark.id})
    return sanitize_bookmark(bookmark)


async def update_bookmark(
    store: BookmarkStore,
    bookmark_id: int,
    payload: BookmarkPayload,
) -> bool:
    """
    Apply a partial update.

    Returns False if no bookmark has this id. The updated row is not
    returned; callers re-read it if they need the new state.
    """
    data = validate_update(payload)
    changes = data.changes()
    updated = await store.update_by_id(bookmark_id, changes)
    if not updated:
        return False
    logger.info(
        "bookmark_updated",
        extra={"bookmark_id": bookmark_id, "fields": sorted(changes)},
    )
    return True


async def delete_bookmark(store: BookmarkStore, bookmark_id: int) -> bool:
    """Delete a bookmark. Returns False if it didn't exist."""
    deleted = await store.delete_by_id(bookmark_id)
    if not deleted:
        return False
    logger.info("bookmark_deleted", extra={"bookmark_id": bookmark_id})
    return True
