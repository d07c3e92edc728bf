# Page router — server-rendered HTML for the public URL scheme.
# Created: 2026-10-19
#
#   /                              storage id form
#   /download/{storage_id}[/path]  directory page
#   /files/{storage_id}/{path}     file page with download link

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from pubfiles.api.deps import get_client
from pubfiles.api.v1.browse import resolve_directory, resolve_file
from pubfiles.client import DirectoryClientProtocol
from pubfiles.formatting import format_size
from pubfiles.models import DirectoryEntry
from pubfiles.views.browser import NavigationState, page_url

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(include_in_schema=False)


def file_url(storage_id: str, path: str) -> str:
    return quote(f"/files/{storage_id}/{path}", safe="/")


def _rows(storage_id: str, entries: list[DirectoryEntry]) -> list[dict]:
    rows = []
    for entry in entries:
        if entry.is_file:
            href = file_url(storage_id, entry.path)
            size = format_size(entry.size) if entry.size is not None else ""
        else:
            href = page_url(storage_id, entry.path)
            size = ""
        rows.append(
            {
                "name": entry.name,
                "href": href,
                "is_file": entry.is_file,
                "is_up": entry.is_up,
                "size": size,
            }
        )
    return rows


def _render_directory(request: Request, storage_id: str, state: NavigationState):
    return templates.TemplateResponse(
        request,
        "directory.html",
        {
            "storage_id": storage_id,
            "path": state.current_path,
            "is_root": state.is_root,
            "status": state.status.value,
            "error": state.error_message,
            "query": state.query,
            "rows": _rows(storage_id, state.entries),
            "search_action": page_url(storage_id, state.current_path),
        },
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Ask for a storage id."""
    return templates.TemplateResponse(request, "index.html", {})


@router.post("/")
async def open_storage(storage_id: str = Form(...)):
    storage_id = storage_id.strip()
    if not storage_id:
        return RedirectResponse("/", status_code=303)
    return RedirectResponse(page_url(storage_id, ""), status_code=303)


@router.get("/download/{storage_id}", response_class=HTMLResponse)
async def directory_root_page(
    request: Request,
    storage_id: str,
    q: str | None = Query(None),
    client: DirectoryClientProtocol = Depends(get_client),
):
    state = await resolve_directory(storage_id, "", client, query=q)
    return _render_directory(request, storage_id, state)


@router.get("/download/{storage_id}/{path:path}", response_class=HTMLResponse)
async def directory_page(
    request: Request,
    storage_id: str,
    path: str,
    q: str | None = Query(None),
    client: DirectoryClientProtocol = Depends(get_client),
):
    state = await resolve_directory(storage_id, path, client, query=q)
    return _render_directory(request, storage_id, state)


@router.get("/files/{storage_id}/{path:path}", response_class=HTMLResponse)
async def file_page(
    request: Request,
    storage_id: str,
    path: str,
    client: DirectoryClientProtocol = Depends(get_client),
):
    view = await resolve_file(storage_id, path, client)
    return templates.TemplateResponse(
        request,
        "file.html",
        {
            "storage_id": storage_id,
            "name": view.name,
            "error": view.state.error_message,
            "size": view.size_label,
            "download_url": view.download_url,
            "folder_url": page_url(storage_id, view.folder_path),
        },
    )
