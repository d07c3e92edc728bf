# Session history — the routing adapter the views listen to.
# Created: 2026-10-19
#
# Models one browser tab's history stack: in-app navigation goes through
# navigate() (before-navigate hooks run first and are awaited), back/forward
# move the index and notify pop-state listeners after the URL has changed.
"""In-process browser-style session history."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import urlsplit

from pubfiles.paths import relative_to_base

logger = logging.getLogger(__name__)

PopStateListener = Callable[[str], Awaitable[None] | None]


@dataclass
class NavigationEvent:
    """An in-app navigation about to happen."""

    from_url: str
    to_url: str
    _prevented: bool = field(default=False, repr=False)

    def prevent_default(self) -> None:
        """Veto the navigation; the URL stays at ``from_url``."""
        self._prevented = True

    @property
    def prevented(self) -> bool:
        return self._prevented


BeforeNavigateHook = Callable[[NavigationEvent], Awaitable[None] | None]


class Subscription:
    """Handle for a registered callback. ``close()`` is idempotent."""

    def __init__(self, registry: list, callback: Callable):
        self._registry = registry
        self._callback = callback
        registry.append(callback)

    @property
    def active(self) -> bool:
        return self._callback in self._registry

    def close(self) -> None:
        try:
            self._registry.remove(self._callback)
        except ValueError:
            pass

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class RoutingAdapter(Protocol):
    """What a view needs from the router."""

    def current_path(self, base: str) -> str | None: ...

    def add_pop_state_listener(self, callback: PopStateListener) -> Subscription: ...

    def on_before_navigate(self, callback: BeforeNavigateHook) -> Subscription: ...


def _location(url: str) -> str:
    # Path part only, still percent-encoded; views decode it
    return urlsplit(url).path or "/"


async def _call(callback: Callable, *args) -> None:
    result = callback(*args)
    if asyncio.iscoroutine(result):
        await result


class RouteHistory:
    """A history stack with pop-state listeners and navigation interception.

    Usage:
        history = RouteHistory("/download/abc")
        await history.navigate("/download/abc/docs")   # hooks awaited first
        await history.back()                           # pop-state dispatched
    """

    def __init__(self, initial_url: str = "/"):
        self._entries: list[str] = [_location(initial_url)]
        self._index = 0
        self._pop_listeners: list[PopStateListener] = []
        self._before_hooks: list[BeforeNavigateHook] = []
        # Bumped by every navigate/go; a pending navigate only commits if
        # nothing newer started while its hooks were awaited
        self._generation = 0

    @property
    def current_url(self) -> str:
        return self._entries[self._index]

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def listener_count(self) -> int:
        return len(self._pop_listeners) + len(self._before_hooks)

    def can_go(self, delta: int) -> bool:
        return 0 <= self._index + delta < len(self._entries)

    def current_path(self, base: str) -> str | None:
        """Storage path of the current URL under *base*, or None if outside."""
        return relative_to_base(self.current_url, base)

    def add_pop_state_listener(self, callback: PopStateListener) -> Subscription:
        return Subscription(self._pop_listeners, callback)

    def on_before_navigate(self, callback: BeforeNavigateHook) -> Subscription:
        return Subscription(self._before_hooks, callback)

    async def navigate(self, url: str, replace: bool = False) -> bool:
        """Navigate in-app to *url*.

        Every before-navigate hook is awaited, in registration order, before
        the URL changes. Returns False if a hook vetoed the navigation
        or a newer navigation (or back/forward) started in the meantime.
        """
        self._generation += 1
        generation = self._generation
        event = NavigationEvent(from_url=self.current_url, to_url=_location(url))
        for hook in list(self._before_hooks):
            await _call(hook, event)
            if event.prevented:
                logger.debug("Navigation to %s prevented", event.to_url)
                return False

        if generation != self._generation:
            logger.debug("Navigation to %s superseded", event.to_url)
            return False

        if replace:
            self._entries[self._index] = event.to_url
        else:
            del self._entries[self._index + 1:]
            self._entries.append(event.to_url)
            self._index += 1
        return True

    async def go(self, delta: int) -> bool:
        """Move *delta* steps through history and dispatch pop-state."""
        if delta == 0 or not self.can_go(delta):
            return False
        self._generation += 1
        self._index += delta
        url = self.current_url
        for listener in list(self._pop_listeners):
            await _call(listener, url)
        return True

    async def back(self) -> bool:
        return await self.go(-1)

    async def forward(self) -> bool:
        return await self.go(1)
