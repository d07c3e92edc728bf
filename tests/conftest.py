# Shared fixtures: an in-memory storage API standing in for PublicFilesClient.
# Created: 2026-10-19

from __future__ import annotations

import asyncio

import pytest

from pubfiles.client import RemoteFetchError, build_download_url
from pubfiles.models import DirectoryEntry, FileMetadata
from pubfiles.paths import join_path

API_BASE = "https://storage.example/api"


def entry(name: str, parent: str = "", is_file: bool = False, size: int | None = None):
    return DirectoryEntry(name=name, path=join_path(parent, name), is_file=is_file, size=size)


class FakeClient:
    """Implements DirectoryClientProtocol over dicts.

    ``gate(path)`` returns an Event that list_directory waits on, so tests
    can decide the order in which responses arrive.
    """

    def __init__(
        self,
        tree: dict[str, list[DirectoryEntry]] | None = None,
        files: dict[str, int] | None = None,
    ):
        self.tree = tree or {}
        self.files = files or {}
        self.failing: set[str] = set()
        self.gates: dict[str, asyncio.Event] = {}
        self.list_calls: list[str] = []
        self.info_calls: list[str] = []
        self.search_calls: list[tuple[str, str]] = []

    def gate(self, path: str) -> asyncio.Event:
        self.gates[path] = asyncio.Event()
        return self.gates[path]

    async def list_directory(self, storage_id: str, path: str) -> list[DirectoryEntry]:
        self.list_calls.append(path)
        if path in self.gates:
            await self.gates[path].wait()
        if path in self.failing or path not in self.tree:
            raise RemoteFetchError(f"tree {path} -> 404", status_code=404)
        return list(self.tree[path])

    async def get_file_metadata(self, storage_id: str, path: str) -> FileMetadata:
        self.info_calls.append(path)
        if path not in self.files:
            raise RemoteFetchError(f"info {path} -> 404", status_code=404)
        return FileMetadata(size=self.files[path], path=path)

    async def search(self, storage_id: str, path: str, query: str) -> list[DirectoryEntry]:
        self.search_calls.append((path, query))
        if path in self.failing:
            raise RemoteFetchError("search failed", status_code=500)
        found = []
        for dir_path, entries in self.tree.items():
            if path and not (dir_path == path or dir_path.startswith(path + "/")):
                continue
            found.extend(e for e in entries if query.lower() in e.name.lower())
        return found

    def build_download_url(self, storage_id: str, path: str) -> str:
        return build_download_url(API_BASE, storage_id, path)


@pytest.fixture
def tree():
    return {
        "": [entry("docs"), entry("readme.txt", is_file=True, size=1536)],
        "docs": [entry("sub", "docs"), entry("guide.pdf", "docs", is_file=True, size=2048)],
        "docs/sub": [entry("deep.txt", "docs/sub", is_file=True, size=10)],
        "empty": [],
    }


@pytest.fixture
def fake_client(tree):
    return FakeClient(tree, files={"readme.txt": 1536, "docs/guide.pdf": 2048})
