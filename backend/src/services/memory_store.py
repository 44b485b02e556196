"""In-process bookmark store with the same contract as SqlBookmarkStore."""
from dataclasses import replace
from typing import Any

from schemas.bookmark import BookmarkCreate, BookmarkRecord


class InMemoryBookmarkStore:
    """
    Bookmark store held in a dict.

    One instance lives on the application state (STORAGE_BACKEND=memory) and
    is injected per request; nothing is kept at module scope. Ids are
    sequential and never reused, matching an autoincrement column.
    """

    def __init__(self, bookmarks: list[BookmarkCreate] | None = None) -> None:
        self._rows: dict[int, BookmarkRecord] = {}
        self._next_id = 1
        for data in bookmarks or []:
            self._add(data)

    def _add(self, data: BookmarkCreate) -> BookmarkRecord:
        record = BookmarkRecord(id=self._next_id, **data.model_dump())
        self._rows[record.id] = record
        self._next_id += 1
        return record

    async def list_all(self) -> list[BookmarkRecord]:
        return [self._rows[key] for key in sorted(self._rows)]

    async def get_by_id(self, bookmark_id: int) -> BookmarkRecord | None:
        return self._rows.get(bookmark_id)

    async def insert(self, data: BookmarkCreate) -> BookmarkRecord:
        return self._add(data)

    async def delete_by_id(self, bookmark_id: int) -> int:
        return 1 if self._rows.pop(bookmark_id, None) is not None else 0

    async def update_by_id(self, bookmark_id: int, changes: dict[str, Any]) -> int:
        current = self._rows.get(bookmark_id)
        if current is None or not changes:
            return 0
        self._rows[bookmark_id] = replace(current, **changes)
        return 1

    async def ping(self) -> bool:
        return True
