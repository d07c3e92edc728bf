# Tests for the pubfiles command line.
# Created: 2026-10-19

from unittest.mock import patch

import pytest

from pubfiles.__main__ import build_parser, main


@pytest.fixture(autouse=True)
def _quiet_logging():
    with patch("pubfiles.__main__.setup_logging"):
        yield


class TestParser:
    def test_serve_options(self):
        args = build_parser().parse_args(["serve", "--host", "0.0.0.0", "-p", "9000"])
        assert args.command == "serve"
        assert args.host == "0.0.0.0"
        assert args.port == 9000

    def test_browse_path_optional(self):
        args = build_parser().parse_args(["browse", "abc"])
        assert args.storage_id == "abc"
        assert args.path == ""

    def test_log_level_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "debug", "serve"])
        assert args.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--log-level", "loud", "serve"])
        assert exc.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


class TestMain:
    def test_info_success(self, fake_client, capsys):
        with patch("pubfiles.client.PublicFilesClient", return_value=fake_client):
            code = main(["info", "abc", "docs/guide.pdf"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Name: guide.pdf" in out
        assert "Size: 2 KB" in out
        assert "/public/files/abc/download/docs/guide.pdf" in out

    def test_info_failure_exit_code(self, fake_client, capsys):
        with patch("pubfiles.client.PublicFilesClient", return_value=fake_client):
            code = main(["info", "abc", "nope.bin"])

        assert code == 1
        assert "File not found or access denied." in capsys.readouterr().err

    def test_serve_uses_settings(self):
        with patch("pubfiles.api.serve.run_server") as mock_run:
            assert main(["serve"]) == 0
        mock_run.assert_called_once_with(host="127.0.0.1", port=8888, dev=False)

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2
        assert "usage" in capsys.readouterr().out.lower()
