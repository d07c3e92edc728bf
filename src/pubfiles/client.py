# Public storage API client — HTTP client for anonymous listing and file info.
# Created: 2026-10-19
#
# Endpoints live under {api_base}/public/files/{storage_id}/:
#   tree/{path}                  directory listing
#   info/{path}                  file metadata
#   download/{path}              file bytes (consumed by the browser, not here)
#   search/{path}?search_path=q  recursive name search

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from pubfiles.config import get_settings
from pubfiles.models import DirectoryEntry, FileMetadata
from pubfiles.paths import normalize_path

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[DirectoryEntry])


class RemoteFetchError(Exception):
    """Listing, metadata or search request failed for any reason."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DirectoryClientProtocol(Protocol):
    """What the views need from a storage backend."""

    async def list_directory(self, storage_id: str, path: str) -> list[DirectoryEntry]:
        """Entries directly under *path*, in server order."""
        ...

    async def get_file_metadata(self, storage_id: str, path: str) -> FileMetadata:
        """Metadata for the file at *path*."""
        ...

    async def search(self, storage_id: str, path: str, query: str) -> list[DirectoryEntry]:
        """Entries under *path* whose name matches *query*."""
        ...

    def build_download_url(self, storage_id: str, path: str) -> str:
        """Direct download address for the file at *path*."""
        ...


def _endpoint(api_base: str, storage_id: str, action: str, path: str = "") -> str:
    url = f"{api_base}/public/files/{quote(storage_id, safe='')}/{action}"
    path = normalize_path(path)
    if path:
        url += "/" + quote(path, safe="/")
    return url


def build_download_url(api_base: str, storage_id: str, path: str) -> str:
    """Direct download address. Pure string derivation, no I/O."""
    return _endpoint(api_base.rstrip("/"), storage_id, "download", path)


class PublicFilesClient:
    """HTTP client for the anonymous (public) side of the storage API.

    Every failure (transport, HTTP status, bad JSON, unexpected payload shape)
    is raised as ``RemoteFetchError``.
    """

    def __init__(self, api_base: str | None = None, timeout: float | None = None):
        settings = get_settings()
        self.api_base = (api_base or settings.api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as e:
            raise RemoteFetchError(
                f"GET {url} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise RemoteFetchError(f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise RemoteFetchError(f"GET {url} returned invalid JSON") from e

    async def list_directory(self, storage_id: str, path: str) -> list[DirectoryEntry]:
        """List the entries of one directory.

        Args:
            storage_id: Storage root identifier.
            path: Directory path under the root (``""`` for the root).

        Returns:
            Entries in the order the server returned them.
        """
        data = await self._get_json(_endpoint(self.api_base, storage_id, "tree", path))
        try:
            return _ENTRIES.validate_python(data)
        except ValidationError as e:
            raise RemoteFetchError("Unexpected directory listing payload") from e

    async def get_file_metadata(self, storage_id: str, path: str) -> FileMetadata:
        """Fetch size (and whatever else the server sends) for one file."""
        data = await self._get_json(_endpoint(self.api_base, storage_id, "info", path))
        try:
            return FileMetadata.model_validate(data)
        except ValidationError as e:
            raise RemoteFetchError("Unexpected file info payload") from e

    async def search(self, storage_id: str, path: str, query: str) -> list[DirectoryEntry]:
        """Search entries under *path* by name."""
        data = await self._get_json(
            _endpoint(self.api_base, storage_id, "search", path),
            params={"search_path": query},
        )
        try:
            return _ENTRIES.validate_python(data)
        except ValidationError as e:
            raise RemoteFetchError("Unexpected search payload") from e

    def build_download_url(self, storage_id: str, path: str) -> str:
        return build_download_url(self.api_base, storage_id, path)
