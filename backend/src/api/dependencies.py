"""FastAPI dependencies for injection."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import verify_api_token
from core.config import get_settings
from db.session import get_async_session
from services.bookmark_store import BookmarkStore, SqlBookmarkStore


async def get_bookmark_store(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkStore:
    """
    Dependency that provides the bookmark store for this request.

    Uses the in-memory store attached to the app when one is configured
    (STORAGE_BACKEND=memory); otherwise wraps the request's database
    session. The session only opens a connection once it is used.
    """
    store = getattr(request.app.state, "bookmark_store", None)
    if store is not None:
        return store
    return SqlBookmarkStore(db)


__all__ = [
    "get_async_session",
    "get_bookmark_store",
    "get_settings",
    "verify_api_token",
]
