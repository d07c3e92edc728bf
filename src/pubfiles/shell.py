# Interactive terminal browser for ``pubfiles browse``.
# Created: 2026-10-19
#
# Drives the same DirectoryBrowser as the web pages: "cd" is an in-app
# navigation (the view loads before the URL commits), "back"/"forward" are
# history moves the view picks up through pop-state.
"""Terminal front-end for browsing a public storage."""

from __future__ import annotations

import asyncio
import logging
import shlex

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pubfiles.client import DirectoryClientProtocol
from pubfiles.formatting import format_size
from pubfiles.history import RouteHistory
from pubfiles.models import DirectoryEntry
from pubfiles.paths import normalize_path, parent_path, relative_to_base
from pubfiles.views.browser import DirectoryBrowser, NavigationStatus, page_url
from pubfiles.views.resolver import FileResolver

logger = logging.getLogger(__name__)

HELP = """\
ls                  show the current listing
cd <name|#|..|/>    open a folder (by name, row number, parent or root)
open <name|#>       show a file's size and download link
back / forward      move through history
go <url>            navigate to /download/... or /files/...
find <query>        search under the current folder (empty query clears)
pwd                 show the current path and URL
help                this text
quit                leave"""


class BrowseShell:
    """Read-eval-print loop over a ``DirectoryBrowser``."""

    prompt = "pubfiles> "

    def __init__(
        self,
        storage_id: str,
        client: DirectoryClientProtocol,
        path: str = "",
        console: Console | None = None,
    ):
        self.storage_id = storage_id
        self.client = client
        self.console = console or Console()
        self.history = RouteHistory(page_url(storage_id, path))
        self.view = DirectoryBrowser(storage_id, client, self.history)

    async def run(self) -> None:
        """Mount the view and process commands until ``quit`` or EOF."""
        async with self.view:
            self.render()
            while True:
                try:
                    line = await asyncio.to_thread(self.console.input, self.prompt)
                except (EOFError, KeyboardInterrupt):
                    self.console.print()
                    break
                if not await self.handle(line):
                    break

    async def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should exit."""
        try:
            args = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]{e}[/red]")
            return True
        if not args:
            return True

        cmd, rest = args[0].lower(), " ".join(args[1:])

        if cmd in ("quit", "exit", "q"):
            return False
        if cmd == "help":
            self.console.print(HELP)
        elif cmd == "ls":
            self.render()
        elif cmd == "pwd":
            self.console.print(escape(f"/{self.view.state.current_path}  ({self.history.current_url})"))
        elif cmd == "cd":
            await self.cd(rest)
        elif cmd == "open":
            await self.open(rest)
        elif cmd == "back":
            if await self.history.back():
                self.render()
            else:
                self.console.print("[yellow]Nothing to go back to[/yellow]")
        elif cmd == "forward":
            if await self.history.forward():
                self.render()
            else:
                self.console.print("[yellow]Nothing to go forward to[/yellow]")
        elif cmd == "go":
            await self.go(rest)
        elif cmd == "find":
            await self.view.search(rest)
            self.render()
        else:
            self.console.print(f"[red]Unknown command: {escape(cmd)}[/red] (try 'help')")
        return True

    # -- commands ----------------------------------------------------------

    def _lookup(self, target: str) -> DirectoryEntry | None:
        # A name wins over a row number ("cd 2" opens a folder named "2")
        found = self.view.find_entry(target)
        if found is not None or not target.isdigit():
            return found
        index = int(target) - 1
        entries = self.view.state.entries
        return entries[index] if 0 <= index < len(entries) else None

    async def cd(self, target: str) -> None:
        target = target.strip()
        current = self.view.state.current_path
        if target in ("", "/"):
            path = ""
        elif target == "..":
            if not current:
                self.console.print("[yellow]Already at the root[/yellow]")
                return
            path = parent_path(current)
        else:
            entry = self._lookup(target)
            if entry is not None and entry.is_file:
                self.console.print(f"[yellow]{escape(entry.name)} is a file, use 'open'[/yellow]")
                return
            path = entry.path if entry is not None else self.view.child_path(target)

        await self.history.navigate(self.view.url_for(path))
        self.render()

    async def open(self, target: str) -> None:
        target = target.strip()
        entry = self._lookup(target)
        if entry is not None:
            path = entry.path
        else:
            path = self.view.child_path(target)
        await self.show_file(path)

    async def go(self, url: str) -> None:
        files_base = f"/files/{self.storage_id}"
        file_path = relative_to_base(url, files_base)
        if file_path:
            await self.show_file(file_path)
            return

        if relative_to_base(url, self.view.base_path) is None:
            self.console.print(f"[yellow]{escape(url)} is outside this storage[/yellow]")
            return
        await self.history.navigate(url)
        self.render()

    async def show_file(self, path: str) -> None:
        resolver = FileResolver(self.storage_id, normalize_path(path), self.client)
        await resolver.mount()
        if resolver.state.error_message:
            self.console.print(f"[red]{resolver.state.error_message}[/red]")
            return
        self.console.print(f"[bold]{escape(resolver.name)}[/bold]  {resolver.size_label}")
        self.console.print(resolver.download_url, soft_wrap=True)

    # -- rendering ---------------------------------------------------------

    def render(self) -> None:
        state = self.view.state
        title = escape(f"{self.storage_id}:/{state.current_path}")
        if state.query:
            title += escape(f"  (search: {state.query})")

        if state.status == NavigationStatus.FAILED:
            self.console.print(f"[red]{state.error_message}[/red]")
            return
        if state.status == NavigationStatus.LOADING:
            self.console.print("Loading...")
            return
        if not state.entries:
            self.console.print(f"[bold]{title}[/bold]\nNo files yet")
            return

        table = Table(title=title, title_justify="left")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name")
        table.add_column("Size", justify="right")
        for i, entry in enumerate(state.entries, start=1):
            if entry.is_file or entry.is_up:
                name = escape(entry.name)
                size = format_size(entry.size) if entry.size is not None else ""
            else:
                name = f"[blue]{escape(entry.name)}/[/blue]"
                size = ""
            table.add_row(str(i), name, size)
        self.console.print(table)
