# Directory browser view — navigation state machine for /download/{storage_id}.
# Created: 2026-10-19
#
# Each load() takes a sequence number; only the response carrying the latest
# number is applied, so out-of-order responses cannot overwrite newer state.
# Routing listeners are held only between mount() and unmount().
"""Directory browser view."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import quote

from pubfiles.client import DirectoryClientProtocol
from pubfiles.history import NavigationEvent, RoutingAdapter, Subscription
from pubfiles.models import DirectoryEntry, up_entry
from pubfiles.paths import join_path, normalize_path, relative_to_base

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load files. Please check the storage ID."
SEARCH_ERROR_MESSAGE = "Search failed. Please try again."


class NavigationStatus(str, Enum):
    """Lifecycle of a directory listing."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class NavigationState:
    """What the directory page renders."""

    current_path: str = ""
    entries: list[DirectoryEntry] = field(default_factory=list)
    status: NavigationStatus = NavigationStatus.IDLE
    error_message: str | None = None
    query: str | None = None  # set while showing search results

    @property
    def is_root(self) -> bool:
        return self.current_path == ""


def download_base(storage_id: str) -> str:
    return f"/download/{storage_id}"


def page_url(storage_id: str, path: str) -> str:
    """Percent-encoded /download/... URL for a directory."""
    path = normalize_path(path)
    url = download_base(storage_id) + (f"/{path}" if path else "")
    return quote(url, safe="/")


class DirectoryBrowser:
    """Browses one storage root, kept in sync with a ``RoutingAdapter``.

    Usage:
        async with DirectoryBrowser(storage_id, client, history) as view:
            ...  # view.state holds the listing for the current URL
    """

    def __init__(
        self,
        storage_id: str,
        client: DirectoryClientProtocol,
        history: RoutingAdapter,
    ):
        if not storage_id:
            raise ValueError("storage_id is required")
        self.storage_id = storage_id
        self.base_path = download_base(storage_id)
        self.state = NavigationState()
        self._client = client
        self._history = history
        self._seq = 0
        self._subscriptions: list[Subscription] = []

    @property
    def mounted(self) -> bool:
        return bool(self._subscriptions)

    def url_for(self, path: str) -> str:
        """Browser URL of a directory path in this storage."""
        return page_url(self.storage_id, path)

    # -- lifecycle ---------------------------------------------------------

    async def mount(self) -> None:
        """Start listening to the router and load the path in the URL."""
        if self.mounted:
            return
        self._subscriptions = [
            self._history.add_pop_state_listener(self.on_pop_state),
            self._history.on_before_navigate(self.on_navigation_intercepted),
        ]
        initial = self._history.current_path(self.base_path) or ""
        await self.load(initial)

    def unmount(self) -> None:
        """Release router listeners. Pending responses will be discarded."""
        for sub in self._subscriptions:
            sub.close()
        self._subscriptions = []
        # Any in-flight load now carries a stale number
        self._seq += 1

    async def __aenter__(self) -> DirectoryBrowser:
        try:
            await self.mount()
        except BaseException:
            self.unmount()
            raise
        return self

    async def __aexit__(self, *exc) -> None:
        self.unmount()

    # -- navigation protocol -----------------------------------------------

    def _begin(self) -> int:
        self._seq += 1
        self.state.status = NavigationStatus.LOADING
        self.state.error_message = None
        return self._seq

    def _is_stale(self, seq: int) -> bool:
        if seq != self._seq:
            logger.debug("Discarding stale response #%d (latest #%d)", seq, self._seq)
            return True
        return False

    async def load(self, path: str) -> bool:
        """Fetch and show the listing for *path*.

        Returns True if this call's result was applied to ``state``; False if
        a newer load (or unmount) superseded it.
        """
        path = normalize_path(path)
        seq = self._begin()
        self.state.current_path = path
        self.state.query = None

        try:
            entries = await self._client.list_directory(self.storage_id, path)
        except Exception:
            if self._is_stale(seq):
                return False
            logger.warning(
                "Listing %s:/%s failed", self.storage_id, path, exc_info=True
            )
            self.state.status = NavigationStatus.FAILED
            self.state.error_message = LOAD_ERROR_MESSAGE
            return True

        if self._is_stale(seq):
            return False

        listing = list(entries)
        if path:
            listing.insert(0, up_entry(path))
        self.state.entries = listing
        self.state.status = NavigationStatus.LOADED
        return True

    async def search(self, query: str) -> bool:
        """Replace the listing with entries under the current path matching *query*."""
        query = query.strip()
        if not query:
            return await self.load(self.state.current_path)

        path = self.state.current_path
        seq = self._begin()
        self.state.query = query

        try:
            entries = await self._client.search(self.storage_id, path, query)
        except Exception:
            if self._is_stale(seq):
                return False
            logger.warning(
                "Search %r in %s:/%s failed", query, self.storage_id, path, exc_info=True
            )
            self.state.status = NavigationStatus.FAILED
            self.state.error_message = SEARCH_ERROR_MESSAGE
            return True

        if self._is_stale(seq):
            return False

        self.state.entries = list(entries)
        self.state.status = NavigationStatus.LOADED
        return True

    async def on_pop_state(self, url: str) -> None:
        """Back/forward: resync from the URL if it is still ours."""
        path = relative_to_base(url, self.base_path)
        if path is None:
            return
        await self.load(path)

    async def on_navigation_intercepted(self, event: NavigationEvent) -> None:
        """Load the target listing before an in-app navigation completes."""
        path = relative_to_base(event.to_url, self.base_path)
        if path is None:
            return
        await self.load(path)

    # -- helpers for callers -----------------------------------------------

    def find_entry(self, name: str) -> DirectoryEntry | None:
        for entry in self.state.entries:
            if entry.name == name:
                return entry
        return None

    def child_path(self, name: str) -> str:
        return join_path(self.state.current_path, name)
