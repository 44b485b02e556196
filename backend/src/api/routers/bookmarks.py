"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Body, Depends, Request, Response

from api.dependencies import get_bookmark_store, verify_api_token
from core.errors import BookmarkNotFoundError
from schemas.bookmark import BookmarkPayload, BookmarkResponse, ErrorResponse
from services import bookmark_service
from services.bookmark_store import BookmarkStore

router = APIRouter(
    prefix="/bookmarks",
    tags=["bookmarks"],
    dependencies=[Depends(verify_api_token)],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    store: BookmarkStore = Depends(get_bookmark_store),
) -> list[BookmarkResponse]:
    """List all bookmarks."""
    bookmarks = await bookmark_service.get_bookmarks(store)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_bookmark(
    request: Request,
    response: Response,
    payload: BookmarkPayload | None = Body(default=None),
    store: BookmarkStore = Depends(get_bookmark_store),
) -> BookmarkResponse:
    """Create a new bookmark."""
    bookmark = await bookmark_service.create_bookmark(store, payload or BookmarkPayload())
    response.headers["Location"] = request.url_for(
        "get_bookmark", bookmark_id=bookmark.id,
    ).path
    return BookmarkResponse.model_validate(bookmark)


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(store, bookmark_id)
    if bookmark is None:
        raise BookmarkNotFoundError(bookmark_id)
    return BookmarkResponse.model_validate(bookmark)


@router.patch(
    "/{bookmark_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}},
)
async def update_bookmark(
    bookmark_id: int,
    payload: BookmarkPayload | None = Body(default=None),
    store: BookmarkStore = Depends(get_bookmark_store),
) -> None:
    """
    Update some fields of a bookmark.

    Returns 204 with no body; GET the bookmark to see its new state.
    """
    updated = await bookmark_service.update_bookmark(
        store, bookmark_id, payload or BookmarkPayload(),
    )
    if not updated:
        raise BookmarkNotFoundError(bookmark_id)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> None:
    """Delete a bookmark."""
    deleted = await bookmark_service.delete_bookmark(store, bookmark_id)
    if not deleted:
        raise BookmarkNotFoundError(bookmark_id)
