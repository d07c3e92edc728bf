# File resolver view — metadata and download link for /files/{storage_id}/{path}.
# Created: 2026-10-19

from __future__ import annotations

import logging
from dataclasses import dataclass

from pubfiles.client import DirectoryClientProtocol
from pubfiles.formatting import format_size
from pubfiles.models import FileMetadata
from pubfiles.paths import basename, normalize_path, parent_path

logger = logging.getLogger(__name__)

FILE_ERROR_MESSAGE = "File not found or access denied."


@dataclass
class FileViewState:
    loading: bool = True
    metadata: FileMetadata | None = None
    error_message: str | None = None


class FileResolver:
    """Terminal view for a single file: no children, no navigation."""

    def __init__(self, storage_id: str, path: str, client: DirectoryClientProtocol):
        if not storage_id:
            raise ValueError("storage_id is required")
        self.storage_id = storage_id
        self.path = normalize_path(path)
        self.state = FileViewState()
        self._client = client

    async def mount(self) -> None:
        """Resolve the file's metadata once."""
        self.state.loading = True
        try:
            self.state.metadata = await self._client.get_file_metadata(
                self.storage_id, self.path
            )
            self.state.error_message = None
        except Exception:
            logger.warning(
                "File info %s:/%s failed", self.storage_id, self.path, exc_info=True
            )
            self.state.error_message = FILE_ERROR_MESSAGE
        finally:
            self.state.loading = False

    @property
    def name(self) -> str:
        return basename(self.path)

    @property
    def folder_path(self) -> str:
        """Directory containing the file (``""`` for the root)."""
        return parent_path(self.path) if self.path else ""

    @property
    def size_label(self) -> str:
        size = self.state.metadata.size if self.state.metadata else 0
        return format_size(size)

    @property
    def download_url(self) -> str:
        return self._client.build_download_url(self.storage_id, self.path)
