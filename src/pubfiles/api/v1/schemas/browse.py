# Browse/file schemas.
# Created: 2026-10-19

from __future__ import annotations

from pubfiles.api.v1.schemas.common import APIResponse
from pubfiles.models import DirectoryEntry
from pubfiles.views.browser import NavigationStatus


class BrowseResponse(APIResponse):
    """Directory listing as the browser view sees it (up-entry included)."""

    storage_id: str
    path: str
    status: NavigationStatus
    entries: list[DirectoryEntry] = []
    error: str | None = None
    query: str | None = None


class FileInfoResponse(APIResponse):
    """Single-file view: display name, size and where to download it."""

    storage_id: str
    path: str
    name: str
    size: int | None = None
    size_label: str | None = None
    download_url: str | None = None
    error: str | None = None
