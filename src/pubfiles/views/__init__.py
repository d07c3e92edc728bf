"""Views: the directory browser state machine and the single-file resolver."""

from pubfiles.views.browser import (
    LOAD_ERROR_MESSAGE,
    DirectoryBrowser,
    NavigationState,
    NavigationStatus,
)
from pubfiles.views.resolver import FILE_ERROR_MESSAGE, FileResolver, FileViewState

__all__ = [
    "DirectoryBrowser",
    "FILE_ERROR_MESSAGE",
    "FileResolver",
    "FileViewState",
    "LOAD_ERROR_MESSAGE",
    "NavigationState",
    "NavigationStatus",
]
