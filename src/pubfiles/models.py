# Wire models for the public storage API.
# Created: 2026-10-19

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pubfiles.paths import parent_path

UP_ENTRY_NAME = ".."


class DirectoryEntry(BaseModel):
    """A single file or directory in a listing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    path: str
    is_file: bool = False
    size: int | None = Field(default=None, ge=0)

    @property
    def is_up(self) -> bool:
        return self.name == UP_ENTRY_NAME and not self.is_file


class FileMetadata(BaseModel):
    """Metadata for a single file, as returned by the ``info`` endpoint."""

    model_config = ConfigDict(extra="ignore")

    size: int = Field(ge=0)
    path: str | None = None


def up_entry(path: str) -> DirectoryEntry:
    """Synthetic entry that navigates to the parent of *path*."""
    return DirectoryEntry(name=UP_ENTRY_NAME, path=parent_path(path), is_file=False)
