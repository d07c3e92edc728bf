# Browse router — JSON form of the directory and file views.
# Created: 2026-10-19
#
# Each request mounts a fresh view on a history seeded with the page URL the
# request corresponds to, so the JSON matches what /download/... would render.

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from pubfiles.api.deps import get_client
from pubfiles.api.v1.schemas.browse import BrowseResponse, FileInfoResponse
from pubfiles.client import DirectoryClientProtocol
from pubfiles.history import RouteHistory
from pubfiles.views.browser import DirectoryBrowser, NavigationState, page_url
from pubfiles.views.resolver import FileResolver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Browse"])


async def resolve_directory(
    storage_id: str,
    path: str,
    client: DirectoryClientProtocol,
    query: str | None = None,
) -> NavigationState:
    """Mount a directory view for one request and return its final state."""
    history = RouteHistory(page_url(storage_id, path))
    async with DirectoryBrowser(storage_id, client, history) as view:
        if query:
            await view.search(query)
        return view.state


async def resolve_file(
    storage_id: str, path: str, client: DirectoryClientProtocol
) -> FileResolver:
    view = FileResolver(storage_id, path, client)
    await view.mount()
    return view


def _browse_response(storage_id: str, state: NavigationState) -> BrowseResponse:
    return BrowseResponse(
        storage_id=storage_id,
        path=state.current_path,
        status=state.status,
        entries=state.entries,
        error=state.error_message,
        query=state.query,
    )


@router.get("/browse/{storage_id}", response_model=BrowseResponse)
async def browse_root(
    storage_id: str,
    q: str | None = Query(None, description="Search under this directory"),
    client: DirectoryClientProtocol = Depends(get_client),
):
    """List the root of a public storage."""
    state = await resolve_directory(storage_id, "", client, query=q)
    return _browse_response(storage_id, state)


@router.get("/browse/{storage_id}/{path:path}", response_model=BrowseResponse)
async def browse_path(
    storage_id: str,
    path: str,
    q: str | None = Query(None, description="Search under this directory"),
    client: DirectoryClientProtocol = Depends(get_client),
):
    """List a directory of a public storage."""
    state = await resolve_directory(storage_id, path, client, query=q)
    return _browse_response(storage_id, state)


@router.get("/file/{storage_id}/{path:path}", response_model=FileInfoResponse)
async def file_info(
    storage_id: str,
    path: str,
    client: DirectoryClientProtocol = Depends(get_client),
):
    """Size and download address of one file."""
    view = await resolve_file(storage_id, path, client)
    if view.state.error_message:
        return FileInfoResponse(
            storage_id=storage_id,
            path=view.path,
            name=view.name,
            error=view.state.error_message,
        )
    return FileInfoResponse(
        storage_id=storage_id,
        path=view.path,
        name=view.name,
        size=view.state.metadata.size,
        size_label=view.size_label,
        download_url=view.download_url,
    )
