# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-19

from __future__ import annotations

from pubfiles.client import DirectoryClientProtocol, PublicFilesClient


def get_client() -> DirectoryClientProtocol:
    """FastAPI dependency returning the storage API client.

    Tests replace it with ``app.dependency_overrides[get_client]``.
    """
    return PublicFilesClient()
