"""pubfiles — anonymous browsing and download of public storages."""

from pubfiles.client import PublicFilesClient, RemoteFetchError, build_download_url
from pubfiles.formatting import format_size
from pubfiles.history import RouteHistory
from pubfiles.models import DirectoryEntry, FileMetadata
from pubfiles.views import DirectoryBrowser, FileResolver, NavigationState, NavigationStatus

__all__ = [
    "DirectoryBrowser",
    "DirectoryEntry",
    "FileMetadata",
    "FileResolver",
    "NavigationState",
    "NavigationStatus",
    "PublicFilesClient",
    "RemoteFetchError",
    "RouteHistory",
    "build_download_url",
    "format_size",
]
