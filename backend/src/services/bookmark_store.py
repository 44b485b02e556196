"""
Persistence adapters for bookmarks.

Stores trust their caller: values arrive already validated. Storage faults
propagate unchanged; nothing here retries.
"""
from typing import Any, Protocol

from sqlalchemy import delete, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkRecord


class BookmarkStore(Protocol):
    """Operations every bookmark store provides."""

    async def list_all(self) -> list[BookmarkRecord]:
        """All bookmarks in storage order (by id)."""
        ...

    async def get_by_id(self, bookmark_id: int) -> BookmarkRecord | None:
        """The bookmark with this id, or None."""
        ...

    async def insert(self, data: BookmarkCreate) -> BookmarkRecord:
        """Insert a bookmark and return it with its generated id."""
        ...

    async def delete_by_id(self, bookmark_id: int) -> int:
        """Delete a bookmark; returns the number of rows removed (0 or 1)."""
        ...

    async def update_by_id(self, bookmark_id: int, changes: dict[str, Any]) -> int:
        """Overwrite the given fields; returns the number of rows matched (0 or 1)."""
        ...

    async def ping(self) -> bool:
        """Check that the backing storage is reachable."""
        ...


def to_record(bookmark: Bookmark) -> BookmarkRecord:
    """Convert an ORM row into a store-independent record."""
    return BookmarkRecord(
        id=bookmark.id,
        title=bookmark.title,
        url=bookmark.url,
        rating=bookmark.rating,
        description=bookmark.description,
    )


class SqlBookmarkStore:
    """Bookmark store backed by `bookmark_table` through an async session."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_all(self) -> list[BookmarkRecord]:
        result = await self._db.execute(select(Bookmark).order_by(Bookmark.id))
        return [to_record(b) for b in result.scalars().all()]

    async def get_by_id(self, bookmark_id: int) -> BookmarkRecord | None:
        result = await self._db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
        bookmark = result.scalar_one_or_none()
        return to_record(bookmark) if bookmark is not None else None

    async def insert(self, data: BookmarkCreate) -> BookmarkRecord:
        bookmark = Bookmark(**data.model_dump())
        self._db.add(bookmark)
        await self._db.flush()
        await self._db.refresh(bookmark)
        return to_record(bookmark)

    async def delete_by_id(self, bookmark_id: int) -> int:
        result = await self._db.execute(
            delete(Bookmark).where(Bookmark.id == bookmark_id),
        )
        await self._db.flush()
        return result.rowcount

    async def update_by_id(self, bookmark_id: int, changes: dict[str, Any]) -> int:
        if not changes:
            return 0
        result = await self._db.execute(
            update(Bookmark)
            .where(Bookmark.id == bookmark_id)
            .values(**changes)
            .execution_options(synchronize_session=False),
        )
        await self._db.flush()
        # Identity map may hold a stale copy from an earlier read in this session
        self._db.expire_all()
        return result.rowcount

    async def ping(self) -> bool:
        await self._db.execute(text("SELECT 1"))
        return True
