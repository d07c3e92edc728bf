# Tests for the interactive terminal browser.
# Created: 2026-10-19

import io

import pytest
from rich.console import Console

from conftest import entry
from pubfiles.shell import BrowseShell


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def shell(fake_client, output):
    console = Console(file=output, width=120, color_system=None)
    return BrowseShell("abc", fake_client, console=console)


async def _mounted(shell):
    await shell.view.mount()
    return shell


class TestBrowseShell:
    async def test_cd_by_name_navigates(self, shell, fake_client):
        await _mounted(shell)
        assert await shell.handle("cd docs") is True

        assert shell.history.current_url == "/download/abc/docs"
        assert shell.view.state.current_path == "docs"
        assert fake_client.list_calls == ["", "docs"]

    async def test_cd_by_row_number(self, shell):
        await _mounted(shell)
        await shell.handle("cd 1")
        assert shell.view.state.current_path == "docs"

    async def test_cd_up_and_root(self, shell):
        await _mounted(shell)
        await shell.handle("cd docs")
        await shell.handle("cd sub")
        await shell.handle("cd ..")
        assert shell.view.state.current_path == "docs"
        await shell.handle("cd /")
        assert shell.view.state.current_path == ""

    async def test_cd_prefers_name_over_row_number(self, shell, fake_client):
        fake_client.tree[""].append(entry("2"))
        fake_client.tree["2"] = [entry("inside.txt", "2", is_file=True, size=1)]
        await _mounted(shell)

        await shell.handle("cd 2")
        assert shell.view.state.current_path == "2"

    async def test_cd_nested_path_under_current(self, shell):
        await _mounted(shell)
        await shell.handle("cd docs/sub")
        assert shell.view.state.current_path == "docs/sub"

    async def test_up_entry_listed_without_slash(self, shell, output):
        await _mounted(shell)
        await shell.handle("cd docs")
        text = output.getvalue()
        assert " .. " in text
        assert "../" not in text

    async def test_cd_into_file_refused(self, shell, output):
        await _mounted(shell)
        await shell.handle("cd readme.txt")
        assert shell.view.state.current_path == ""
        assert "is a file" in output.getvalue()

    async def test_back_and_forward(self, shell, fake_client):
        await _mounted(shell)
        await shell.handle("cd docs")
        await shell.handle("cd sub")
        fake_client.list_calls.clear()

        await shell.handle("back")
        assert shell.view.state.current_path == "docs"
        await shell.handle("forward")
        assert shell.view.state.current_path == "docs/sub"
        assert fake_client.list_calls == ["docs", "docs/sub"]

    async def test_back_at_start(self, shell, output):
        await _mounted(shell)
        await shell.handle("back")
        assert "Nothing to go back to" in output.getvalue()

    async def test_open_file(self, shell, output):
        await _mounted(shell)
        await shell.handle("open readme.txt")
        text = output.getvalue()
        assert "readme.txt" in text
        assert "1.5 KB" in text
        assert "/public/files/abc/download/readme.txt" in text

    async def test_open_missing_file(self, shell, output):
        await _mounted(shell)
        await shell.handle("open ghost.txt")
        assert "File not found or access denied." in output.getvalue()

    async def test_go_download_url(self, shell):
        await _mounted(shell)
        await shell.handle("go /download/abc/docs/sub")
        assert shell.view.state.current_path == "docs/sub"

    async def test_go_files_url(self, shell, output):
        await _mounted(shell)
        await shell.handle("go /files/abc/docs/guide.pdf")
        assert "guide.pdf" in output.getvalue()
        assert shell.view.state.current_path == ""

    async def test_go_outside_storage(self, shell, output):
        await _mounted(shell)
        await shell.handle("go /download/other")
        assert "outside this storage" in output.getvalue()
        assert shell.history.current_url == "/download/abc"

    async def test_find(self, shell):
        await _mounted(shell)
        await shell.handle("find guide")
        assert [e.name for e in shell.view.state.entries] == ["guide.pdf"]

    async def test_failed_listing_rendered(self, shell, output):
        await _mounted(shell)
        await shell.handle("cd nowhere")
        assert "Failed to load files" in output.getvalue()

    async def test_unknown_and_quit(self, shell, output):
        assert await shell.handle("frobnicate") is True
        assert "Unknown command" in output.getvalue()
        assert await shell.handle("quit") is False
        assert await shell.handle("") is True

    async def test_run_until_eof(self, shell, fake_client, monkeypatch):
        lines = iter(["cd docs", "ls"])

        def fake_input(prompt=""):
            try:
                return next(lines)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr(shell.console, "input", fake_input)
        await shell.run()

        assert fake_client.list_calls == ["", "docs"]
        assert shell.history.listener_count == 0
